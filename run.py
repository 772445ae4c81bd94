"""
Entry Point Script (Bootstrap)
==============================
Development runner for the GUI without installing the package.

It lives outside the 'src' package and puts 'src' on 'sys.path' so that
'from runedrakraft...' resolves.

Usage:
    $ python run.py
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from runedrakraft.app.main import main

if __name__ == "__main__":
    sys.exit(main())
