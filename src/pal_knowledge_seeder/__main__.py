import sys

from pal_knowledge_seeder.cli import main

sys.exit(main())
