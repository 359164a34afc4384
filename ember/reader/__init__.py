from ember.reader.cursor import CharCursor, EOF, is_delimiter
from ember.reader.parser import Reader, read, read_string

__all__ = ["CharCursor", "EOF", "is_delimiter", "Reader", "read", "read_string"]
