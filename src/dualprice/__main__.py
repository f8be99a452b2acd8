"""Module entry point: python -m dualprice."""
import sys

from dualprice.app import main

sys.exit(main())
