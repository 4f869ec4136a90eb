"""IPv4 and IPv6 address codecs, with or without a port.

HOW: ``ipaddress`` validates and packs the address. With a port, the IR
is the big-endian port followed by the address octets, then the whole
buffer is reversed so it reads least-significant byte first like every
other numeric IR. IPv6 with a port uses the bracketed ``[addr]:port``
form.

RULES:
- IR sizes: 4 (v4), 6 (v4 + port), 16 (v6), 18 (v6 + port)
- Ports must be 0..65535
"""

from __future__ import annotations

import enum
import ipaddress
import re
from typing import List, Optional, Tuple, Type, Union

from byte_converter.codecs.base import BaseCodec
from byte_converter.core.errors import ConversionError

Address = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

_PORT_RE = re.compile(r"^[0-9]{1,5}$")


class AddressForm(enum.Enum):
    WITH_PORT = "with port"
    WITHOUT_PORT = "without port"

    @property
    def label(self) -> str:
        return self.value


def _parse_port(raw: str) -> int:
    if not _PORT_RE.match(raw) or int(raw) > 0xFFFF:
        raise ConversionError("invalid port {!r}".format(raw))
    return int(raw)


class _AddressCodec(BaseCodec):
    """Shared logic for the IPv4 and IPv6 codecs."""

    address_type: Type[Address]
    size: int

    def _parse_address(self, raw: str) -> Address:
        try:
            return self.address_type(raw)
        except ValueError:
            raise ConversionError("{!r} is not an {} address".format(raw, self.name)) from None

    def _split_port(self, text: str) -> Tuple[str, str]:
        raise NotImplementedError

    def _join_port(self, address: Address, port: int) -> str:
        raise NotImplementedError

    def _parse(self, text: str, form: AddressForm) -> Tuple[Address, Optional[int]]:
        if form is AddressForm.WITHOUT_PORT:
            return self._parse_address(text), None
        host, port = self._split_port(text)
        return self._parse_address(host), _parse_port(port)

    def identify(self, text: str) -> Optional[List[AddressForm]]:
        for form in (AddressForm.WITH_PORT, AddressForm.WITHOUT_PORT):
            try:
                self._parse(text, form)
            except ConversionError:
                continue
            return [form]
        return None

    def decode(self, text: str, variant: AddressForm) -> bytes:
        self._check_variant(variant, tuple(AddressForm))
        address, port = self._parse(text, variant)
        result = bytearray()
        if port is not None:
            result.extend(port.to_bytes(2, "big"))
        result.extend(address.packed)
        result.reverse()
        return bytes(result)

    def variants(self, ir: bytes) -> Optional[List[AddressForm]]:
        if len(ir) == self.size:
            return [AddressForm.WITHOUT_PORT]
        if len(ir) == self.size + 2:
            return [AddressForm.WITH_PORT]
        return None

    def encode(self, ir: bytes, variant: AddressForm) -> str:
        self._check_variant(variant, tuple(AddressForm))
        expected = self.size + 2 if variant is AddressForm.WITH_PORT else self.size
        if len(ir) != expected:
            raise ConversionError("{} {} needs {} bytes, got {}".format(
                self.name, variant.label, expected, len(ir)))

        ordered = ir[::-1]
        if variant is AddressForm.WITHOUT_PORT:
            return str(self.address_type(ordered))
        port = int.from_bytes(ordered[:2], "big")
        return self._join_port(self.address_type(ordered[2:]), port)


class IPv4Codec(_AddressCodec):
    key = "ipv4"
    address_type = ipaddress.IPv4Address
    size = ipaddress.IPV4LENGTH // 8

    @property
    def name(self) -> str:
        return "IPv4 address"

    def _split_port(self, text: str) -> Tuple[str, str]:
        host, sep, port = text.rpartition(":")
        if not sep:
            raise ConversionError("{!r} has no port".format(text))
        return host, port

    def _join_port(self, address: Address, port: int) -> str:
        return "{}:{}".format(address, port)


class IPv6Codec(_AddressCodec):
    key = "ipv6"
    address_type = ipaddress.IPv6Address
    size = ipaddress.IPV6LENGTH // 8

    @property
    def name(self) -> str:
        return "IPv6 address"

    def _split_port(self, text: str) -> Tuple[str, str]:
        if not text.startswith("["):
            raise ConversionError("{!r} has no port".format(text))
        host, sep, port = text[1:].rpartition("]:")
        if not sep:
            raise ConversionError("{!r} has no port".format(text))
        return host, port

    def _join_port(self, address: Address, port: int) -> str:
        return "[{}]:{}".format(address, port)
