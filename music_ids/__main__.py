import sys

from music_ids.cli import main

sys.exit(main())
