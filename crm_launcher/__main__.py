import sys

from crm_launcher.main import main

sys.exit(main())
