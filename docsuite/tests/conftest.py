"""
Test configuration for DocSuite tests.

sys.path is configured so 'from docsuite...' resolves whether pytest is run
from the repository root or from inside docsuite/.
"""
import sys
from pathlib import Path

_package_dir = Path(__file__).parent.parent        # .../docsuite/
_project_root = _package_dir.parent                # repository root

if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))
