"""Allow ``python -m devcard``."""

from devcard.devcard import main

if __name__ == '__main__':
    main()
