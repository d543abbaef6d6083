"""Run the patterns demo from a source checkout: ``python main.py``."""

from patterns.demo import main

if __name__ == "__main__":
    main()
