"""Allow running yday as ``python -m yday``."""

from yday.yday import main

if __name__ == '__main__':
    main()
