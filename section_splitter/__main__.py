import sys

from .cli.split_image import main

sys.exit(main())
