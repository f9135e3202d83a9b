"""Allow ``python -m minecraft_mod_updater``."""
import sys

from .main import main


sys.exit(main())
