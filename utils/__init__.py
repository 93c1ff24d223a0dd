"""
Shared helpers: exceptions, operation decorator and wire format conversions.
"""
