"""Request framing and response parsing for the Gemini protocol.

Request:  <url>CRLF
Response: <2-byte status><SPACE><meta>CRLF<body until EOF>
"""

from gemfetch.protocol.constants import (
    CRLF,
    MIN_HEADER_LENGTH,
    SPACE_BYTE,
    STATUS_LENGTH,
    TEXT_ENCODING,
)
from gemfetch.protocol.errors import (
    HeaderTooShortError,
    InvalidEncodingError,
    MissingSpaceCharacterError,
    MissingTerminatorError,
)
from gemfetch.protocol.models import Header, Response


def encode_request(url: str) -> bytes:
    """Frame a URL as a Gemini request line.

    The URL is not validated here. Lone surrogates, which is how Python
    carries undecodable bytes from argv or the filesystem, are written back
    as the original bytes, so encoding never fails.

    Args:
        url: Absolute URL to request.

    Returns:
        URL bytes followed by CRLF.
    """
    return url.encode(TEXT_ENCODING, "surrogateescape") + CRLF


def decode_response(data: bytes) -> Response:
    """Parse a complete response buffer.

    The buffer is split on the first CRLF, so a CRLF inside the body
    stays part of the body.

    Args:
        data: All bytes read from the stream.

    Returns:
        Decoded response.

    Raises:
        MissingTerminatorError: If the buffer has no CRLF.
        HeaderTooShortError: If the header is shorter than 3 bytes.
        MissingSpaceCharacterError: If byte 2 of the header is not a space.
        InvalidEncodingError: If status, meta, or body is not valid text.
    """
    split_loc = data.find(CRLF)
    if split_loc == -1:
        raise MissingTerminatorError

    raw_header = data[:split_loc]
    raw_body = data[split_loc + len(CRLF) :]

    header = _parse_header(raw_header)

    # Any charset parameter in the meta field is ignored.
    body = _decode_text(raw_body, "body")
    return Response(header=header, body=body)


def _parse_header(raw_header: bytes) -> Header:
    """Parse the header line (without its CRLF).

    Args:
        raw_header: Header bytes.

    Returns:
        Parsed header.
    """
    if len(raw_header) < MIN_HEADER_LENGTH:
        raise HeaderTooShortError(len(raw_header))

    if raw_header[STATUS_LENGTH] != SPACE_BYTE:
        raise MissingSpaceCharacterError

    raw_status = raw_header[:STATUS_LENGTH]
    raw_meta = raw_header[MIN_HEADER_LENGTH:]

    # Status must stay two characters after decoding
    status = _decode_text(raw_status, "status", encoding="ascii")
    meta = _decode_text(raw_meta, "meta")
    return Header(status=status, meta=meta)


def _decode_text(raw: bytes, part: str, encoding: str = TEXT_ENCODING) -> str:
    """Decode bytes strictly, mapping failures to InvalidEncodingError.

    Args:
        raw: Bytes to decode.
        part: Name of the response part, for error reporting.
        encoding: Codec to decode with.

    Returns:
        Decoded text.
    """
    try:
        return raw.decode(encoding)
    except UnicodeDecodeError as e:
        raise InvalidEncodingError(part=part, reason=str(e)) from e
