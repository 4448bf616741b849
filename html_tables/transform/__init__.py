"""
Record building: header-tree row mapping and tabular (pandas) export.
"""
