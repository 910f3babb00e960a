"""Small helper script to print SHA-256 digests from the command line."""

import sys
from pathlib import Path

try:
    from streamhash.app import main
except ImportError:
    # If the package isn't installed, put src/ on sys.path so the local
    # package can be imported for quick local runs.
    project_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(project_root / "src"))
    from streamhash.app import main


if __name__ == "__main__":
    sys.exit(main())
