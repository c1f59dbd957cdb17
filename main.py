# main.py
from ethscope.cli.cli import main

if __name__ == "__main__":
    main()
