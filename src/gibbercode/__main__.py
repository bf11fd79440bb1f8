"""
Run the gibbercode command line as a module.

    python -m gibbercode encode 23242151 123    # nurlyt-nyq
    python -m gibbercode decode nurlyt-nyq      # 23242151 123
"""
import sys
from .api.cli import main

if __name__ == "__main__":
    sys.exit(main())
