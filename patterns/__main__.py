"""Allow ``python -m patterns`` to run the demo."""

from patterns.demo import main

main()
