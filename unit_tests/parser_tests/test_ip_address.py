import random
import unittest

from url_ipv4 import IPAddress, NotAnIpError, canonicalize, is_ipv4, parse, to_address


class TestIPAddress(unittest.TestCase):

    def test_to_address_orders_octets_big_endian(self):
        addr = to_address("1.2.3.4")
        self.assertEqual(addr.octets, (1, 2, 3, 4))
        self.assertEqual(addr.to_int(), 0x01020304)
        self.assertEqual(addr.packed, b"\x01\x02\x03\x04")
        self.assertEqual(str(addr), "1.2.3.4")

    def test_to_address_short_forms(self):
        self.assertEqual(to_address("127.1"), IPAddress((127, 0, 0, 1)))
        self.assertEqual(to_address("0xff.0xffffff"), IPAddress((255, 255, 255, 255)))

    def test_to_address_propagates_failure(self):
        with self.assertRaises(NotAnIpError):
            to_address("1.2.3.4.5")
        with self.assertRaises(NotAnIpError):
            to_address("")

    def test_is_ipv4(self):
        self.assertTrue(is_ipv4("017700000001"))
        self.assertTrue(is_ipv4(b"0"))
        self.assertFalse(is_ipv4(""))
        self.assertFalse(is_ipv4("0x"))
        self.assertFalse(is_ipv4("0x100.0xff.0xff.0xff"))
        self.assertFalse(is_ipv4("example.com"))

    def test_parse_accepts_int_tuple_and_text(self):
        self.assertEqual(IPAddress.parse(2130706433), IPAddress((127, 0, 0, 1)))
        self.assertEqual(IPAddress.parse((10, 0, 0, 1)), IPAddress((10, 0, 0, 1)))
        self.assertEqual(IPAddress.parse("10.1"), IPAddress((10, 0, 0, 1)))
        addr = IPAddress((8, 8, 8, 8))
        self.assertIs(IPAddress.parse(addr), addr)

    def test_parse_rejects_bad_values(self):
        with self.assertRaises(ValueError):
            IPAddress.parse((1, 2, 3))
        with self.assertRaises(ValueError):
            IPAddress.parse((1, 2, 3, 256))
        with self.assertRaises(ValueError):
            IPAddress.parse(1 << 32)
        with self.assertRaises(TypeError):
            IPAddress.parse(1.5)
        with self.assertRaises(TypeError):
            IPAddress.parse(True)

    def test_constructor_validates_octets(self):
        with self.assertRaises(ValueError):
            IPAddress((0, 0, 0, -1))

    def test_canonical_form_reparses_to_same_value(self):
        rng = random.Random(1972)
        for _ in range(200):
            value = rng.getrandbits(32)
            a = value >> 24
            spelled = f"0x{a:x}.{value & 0xFFFFFF}"
            self.assertEqual(parse(spelled), value)
            self.assertEqual(parse(canonicalize(spelled)), value)

    def test_canonicalize(self):
        self.assertEqual(canonicalize("0x7f.1"), "127.0.0.1")
        self.assertEqual(canonicalize("4294967295"), "255.255.255.255")


def test_dotted_quads_roundtrip_octets():
    rng = random.Random(7)
    for _ in range(200):
        octets = tuple(rng.randrange(256) for _ in range(4))
        text = ".".join(str(o) for o in octets)
        assert to_address(text).octets == octets


if __name__ == "__main__":
    unittest.main()
