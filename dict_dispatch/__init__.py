"""
dict_dispatch - Look up words in your installed dictionary apps

A small dispatcher that takes a word or text selection from an editor
and routes it to GoldenDict, Bob, Eudic, Easydict or the macOS
Dictionary, optionally reading it aloud.
"""

__version__ = "1.2.0"
__author__ = "dict_dispatch Contributors"
