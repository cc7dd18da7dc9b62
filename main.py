"""
Console harness for the questionnaire runner

Run with: python main.py
"""

import sys

from questionnaire.cli import main


if __name__ == '__main__':
    sys.exit(main())
