"""Entity status values.

Status is a plain boolean column; these names keep call sites readable.
"""

ACTIVE: bool = True
INACTIVE: bool = False
