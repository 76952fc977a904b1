import sys

from consolelog.main import main

sys.exit(main())
