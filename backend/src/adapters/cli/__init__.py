"""
Command-line front end for roster files.
"""
