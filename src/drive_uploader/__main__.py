import sys

from drive_uploader.main import main

sys.exit(main())
