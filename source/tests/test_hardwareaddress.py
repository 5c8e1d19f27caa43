import unittest

from mojo.wakeonlan.exceptions import ExitCode, MacAddressNotEUI48Error, MacAddressParseError
from mojo.wakeonlan.hardwareaddress import check_eui48_address, format_mac_address, parse_mac_address

EXPECTED = bytes([0x00, 0x00, 0x5e, 0x00, 0x53, 0x01])


class TestParseMacAddressPositive(unittest.TestCase):

    def test_parse_colon_separated(self):
        result = parse_mac_address("00:00:5e:00:53:01")
        assert result == EXPECTED, "Unexpected address bytes. result={}".format(result)
        return

    def test_parse_dash_separated(self):
        result = parse_mac_address("00-00-5e-00-53-01")
        assert result == EXPECTED, "Unexpected address bytes. result={}".format(result)
        return

    def test_parse_dotted(self):
        result = parse_mac_address("0000.5e00.5301")
        assert result == EXPECTED, "Unexpected address bytes. result={}".format(result)
        return

    def test_parse_upper_case(self):
        result = parse_mac_address("AA:BB:CC:DD:EE:FF")
        assert result == bytes([0xAA, 0xBB, 0xCC, 0xDD, 0xEE, 0xFF])
        return

    def test_parse_eui64(self):
        result = parse_mac_address("02:00:5e:10:00:00:00:01")
        assert len(result) == 8
        return

    def test_parse_infiniband(self):
        result = parse_mac_address(":".join(["00"] * 20))
        assert len(result) == 20
        return


class TestParseMacAddressNegative(unittest.TestCase):

    def test_parse_mixed_separators(self):
        self.assertRaises(MacAddressParseError, parse_mac_address, "00:00-5e:00:53:01")
        return

    def test_parse_not_hex(self):
        self.assertRaises(MacAddressParseError, parse_mac_address, "zz:00:5e:00:53:01")
        return

    def test_parse_no_separators(self):
        self.assertRaises(MacAddressParseError, parse_mac_address, "00005e005301")
        return

    def test_parse_wrong_octet_count(self):
        self.assertRaises(MacAddressParseError, parse_mac_address, "00:00:5e:00:53")
        return

    def test_parse_rejects_surrounding_whitespace(self):
        self.assertRaises(MacAddressParseError, parse_mac_address, "  aa:bb:cc:dd:ee:ff\n")
        self.assertRaises(MacAddressParseError, parse_mac_address, "aa:bb:cc:dd:ee:ff ")
        self.assertRaises(MacAddressParseError, parse_mac_address, "aa:bb:cc:dd:ee:ff\n")
        self.assertRaises(MacAddressParseError, parse_mac_address, "aabb.ccdd.eeff\n")
        return

    def test_parse_empty(self):
        self.assertRaises(MacAddressParseError, parse_mac_address, "")
        return

    def test_parse_error_exit_code(self):
        try:
            parse_mac_address("not-a-mac")
        except MacAddressParseError as xcpt:
            assert xcpt.exit_code == ExitCode.MAC_ADDRESS_UNPARSEABLE
            assert xcpt.address_text == "not-a-mac"
        else:
            self.fail("Expected a MacAddressParseError.")
        return


class TestCheckEui48Address(unittest.TestCase):

    def test_check_eui48_accepts_six_bytes(self):
        assert check_eui48_address(EXPECTED) == EXPECTED
        return

    def test_check_eui48_rejects_eui64(self):
        hwaddr = parse_mac_address("02:00:5e:10:00:00:00:01")
        self.assertRaises(MacAddressNotEUI48Error, check_eui48_address, hwaddr)
        return

    def test_check_eui48_exit_code(self):
        assert MacAddressNotEUI48Error.exit_code == ExitCode.MAC_ADDRESS_NOT_EUI48
        return

    def test_format_mac_address(self):
        assert format_mac_address(EXPECTED) == "00:00:5e:00:53:01"
        return


if __name__ == '__main__':
    unittest.main()
