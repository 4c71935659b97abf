"""Interactive remote branch deletion.

Features:
- List remote branches with their status (protected, merged, unmerged)
- Pick branches to delete with fzf, previewing each branch log
- main and master are never deleted
- Confirmation table before anything is pushed
- English and Japanese messages
"""

__version__ = "0.1.0"
