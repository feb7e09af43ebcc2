import sys

from scala_oas_generator.cli import main

sys.exit(main())
