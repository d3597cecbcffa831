"""Highlight a snippet in 3 lines: zero config, zero deps."""

from nanolight import highlight

html = highlight('const greeting = "Hello, World";')
print(html)
