"""Wire-level constants for the Gemini protocol.

Centralizes framing constants shared by the codec and transport.
"""

# Header/body separator and request line terminator
CRLF = b"\r\n"

# Header layout: 2 status characters, 1 space, then the meta field
STATUS_LENGTH = 2
MIN_HEADER_LENGTH = STATUS_LENGTH + 1
SPACE_BYTE = 0x20

# Text encoding for request lines, headers, and bodies
TEXT_ENCODING = "utf-8"

# Default Gemini port and URL scheme
DEFAULT_PORT = 1965
GEMINI_SCHEME = "gemini"
