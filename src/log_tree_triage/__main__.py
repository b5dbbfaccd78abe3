"""Module entrypoint.

Allows:
    python -m log_tree_triage
"""

from __future__ import annotations

from log_tree_triage.server.log_server import main

if __name__ == "__main__":
    main()
