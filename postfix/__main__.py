"""
Lets you say

    py -m postfix "1 2 + ."

with the same effect as the "postfix" console script.
"""
from postfix.cmdline import main

main()
