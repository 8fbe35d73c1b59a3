"""PEM decoding and encoding, and certificate helpers built on it."""

from __future__ import annotations

import base64
import binascii
import hashlib
import textwrap
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import BinaryIO

from cryptography import x509
from cryptography.hazmat.primitives.serialization import Encoding

_BEGIN = b"-----BEGIN "
_END = b"-----END "
_DASHES = b"-----"
_CERTIFICATE = "CERTIFICATE"


@dataclass
class PemBlock:
    """One decoded PEM block."""

    type: str
    bytes: bytes
    headers: dict[str, str] = field(default_factory=dict)


def _get_line(data: bytes) -> tuple[bytes, bytes]:
    idx = data.find(b"\n")
    if idx < 0:
        line, rest = data, b""
    else:
        line, rest = data[:idx], data[idx + 1:]
    return line.rstrip(b" \t\r"), rest


def _text(raw: bytes) -> str:
    return raw.decode("utf-8", errors="replace")


def _parse_block(rest: bytes) -> tuple[PemBlock | None, bytes]:
    """Parse a block whose BEGIN marker has been consumed.

    Returns the block and the data after it, or None and where to resume.
    """
    type_line, rest = _get_line(rest)
    if not type_line.endswith(_DASHES):
        return None, rest
    block_type = type_line[: -len(_DASHES)]

    headers: dict[str, str] = {}
    while True:
        if not rest:
            return None, rest
        line, following = _get_line(rest)
        key, sep, value = line.partition(b":")
        if not sep:
            break
        headers[_text(key.strip(b" \t"))] = _text(value.strip(b" \t"))
        rest = following

    if not headers and rest.startswith(_END):
        end_index, trailer_index = 0, len(_END)
    else:
        end_index = rest.find(b"\n" + _END)
        if end_index < 0:
            return None, rest
        trailer_index = end_index + 1 + len(_END)

    trailer_len = len(block_type) + len(_DASHES)
    trailer = rest[trailer_index:trailer_index + trailer_len]
    if (
        len(trailer) < trailer_len
        or not trailer.startswith(block_type)
        or not trailer.endswith(_DASHES)
    ):
        return None, rest
    leftover, after = _get_line(rest[trailer_index + trailer_len:])
    if leftover:
        return None, rest

    encoded = rest[:end_index].translate(None, b" \t\r\n")
    try:
        payload = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError):
        return None, rest
    return PemBlock(_text(block_type), payload, headers), after


def _decode(data: bytes) -> tuple[PemBlock | None, bytes]:
    rest = data
    while True:
        if rest.startswith(_BEGIN):
            rest = rest[len(_BEGIN):]
        else:
            idx = rest.find(b"\n" + _BEGIN)
            if idx < 0:
                return None, data
            rest = rest[idx + 1 + len(_BEGIN):]
        block, rest = _parse_block(rest)
        if block is not None:
            return block, rest


def decode_all(pem_bytes: bytes) -> list[PemBlock]:
    """Decode every valid PEM block in order; malformed blocks are skipped."""
    blocks: list[PemBlock] = []
    block, rest = _decode(bytes(pem_bytes))
    while block is not None:
        blocks.append(block)
        block, rest = _decode(rest)
    return blocks


def _encode_block(block_type: str, payload: bytes) -> bytes:
    encoded = base64.b64encode(payload).decode("ascii")
    lines = [
        f"-----BEGIN {block_type}-----",
        *textwrap.wrap(encoded, 64),
        f"-----END {block_type}-----",
    ]
    return ("\n".join(lines) + "\n").encode("ascii")


def _der(cert: x509.Certificate) -> bytes:
    return cert.public_bytes(Encoding.DER)


def encode_to_bytes(cert: x509.Certificate) -> bytes:
    """Return the certificate as a PEM CERTIFICATE block."""
    return _encode_block(_CERTIFICATE, _der(cert))


def encode_to_string(cert: x509.Certificate) -> str:
    return encode_to_bytes(cert).decode("ascii")


def pem_bytes_to_certificates(pem: bytes) -> list[x509.Certificate]:
    """Parse every block that holds a certificate, discarding the rest."""
    certs: list[x509.Certificate] = []
    for block in decode_all(pem):
        try:
            certs.append(x509.load_der_x509_certificate(block.bytes))
        except ValueError:
            continue
    return certs


def pem_string_to_certificates(pem: str) -> list[x509.Certificate]:
    return pem_bytes_to_certificates(pem.encode("utf-8"))


def fingerprint_from_certificate(cert: x509.Certificate | None) -> str:
    """Return the lower-case hex SHA-1 fingerprint, or '' for None."""
    if cert is None:
        return ""
    return hashlib.sha1(_der(cert)).hexdigest()


def fingerprint_from_pem_bytes(pem: bytes) -> str:
    """Fingerprint of the first parsable certificate, or ''."""
    certs = pem_bytes_to_certificates(pem)
    return fingerprint_from_certificate(certs[0]) if certs else ""


def fingerprint_from_pem_string(pem: str) -> str:
    """Fingerprint of the first parsable certificate, or ''."""
    certs = pem_string_to_certificates(pem)
    return fingerprint_from_certificate(certs[0]) if certs else ""


def marshal_to_pem(certs: Iterable[x509.Certificate], writer: BinaryIO) -> None:
    """Write each certificate as PEM; stop and raise OSError on the first write failure."""
    for cert in certs:
        try:
            writer.write(encode_to_bytes(cert))
        except (OSError, ValueError) as err:
            raise OSError(
                "unexpected error while writing pem. no further attempt to "
                f"marshall certificates will be done: {err}"
            ) from err