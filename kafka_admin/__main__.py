import sys

from kafka_admin.cli import main

sys.exit(main())
