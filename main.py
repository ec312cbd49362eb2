#!/usr/bin/env python3
"""
Cho-Han - the traditional Japanese dice betting game
"""

from chohan.cli.__main__ import main


if __name__ == '__main__':
    main()
