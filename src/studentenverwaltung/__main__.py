"""Start mit: python -m studentenverwaltung"""

from .main import main

main()
