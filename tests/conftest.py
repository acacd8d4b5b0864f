import os
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Draw figures off-screen
os.environ.setdefault("MPLBACKEND", "Agg")
