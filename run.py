# /run.py

from catalog.server import main

if __name__ == "__main__":
  main()
