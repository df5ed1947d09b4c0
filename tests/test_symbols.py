import unittest

from memmap_tool.mapfile.symbols import (
    SymbolEntry,
    parse_symbol_line,
    rank_symbols,
    resolve_name,
)

from map_samples import SAMPLE_MAP, code_line, code_section


class TestResolveName(unittest.TestCase):

    def test_dot_member(self):
        line = "    00000090    00000c78     rcl_cc23x0r5.a : ble5.c.obj (.text.RCL_Handler_BLE5_adv)"
        self.assertEqual(resolve_name(line), "RCL_Handler_BLE5_adv")

    def test_colon_member(self):
        line = "    00000090    00000080     driverlib.a : setup.o (.text:SetupTrimDevice)"
        self.assertEqual(resolve_name(line), "SetupTrimDevice")

    def test_other_paren_group_verbatim(self):
        line = "    00000090    00000010     libc.a : memcpy.o (memcpy16)"
        self.assertEqual(resolve_name(line), "memcpy16")

    def test_last_token_fallback(self):
        line = "    00000090    00000006     libc.a : pre_init.o"
        self.assertEqual(resolve_name(line), "pre_init.o")


class TestParseSymbolLine(unittest.TestCase):

    def test_size_decoded(self):
        entry = parse_symbol_line(code_line(0x1000, "a.o (.text.big)"))
        self.assertEqual(entry, SymbolEntry(0x1000, "big"))

    def test_zero_size_dropped(self):
        self.assertIsNone(parse_symbol_line(code_line(0, "a.o (.text.empty)")))

    def test_bare_section_dropped(self):
        self.assertIsNone(parse_symbol_line(code_line(0x10, "exit.o (.text)")))

    def test_needs_indent_and_two_hex_fields(self):
        self.assertIsNone(parse_symbol_line("00000090    00000010     a.o (.text.foo)"))
        self.assertIsNone(parse_symbol_line("    00000090    UNINITIALIZED"))


class TestRankSymbols(unittest.TestCase):

    def test_top_one(self):
        text = code_section(code_line(0x0a, "a.o (.text.small)"), code_line(0x1000, "b.o (.text.big)"))
        self.assertEqual(rank_symbols(text, 1), [SymbolEntry(0x1000, "big")])

    def test_zero_size_never_emitted(self):
        text = code_section(code_line(0, "a.o (.text.zero)"), code_line(0x4, "b.o (.text.tiny)"))
        self.assertEqual(rank_symbols(text, 10), [SymbolEntry(4, "tiny")])

    def test_ties_keep_file_order(self):
        text = code_section(
            code_line(0x20, "a.o (.text.first)"),
            code_line(0x40, "b.o (.text.biggest)"),
            code_line(0x20, "c.o (.text.second)"),
        )
        self.assertEqual([s.name for s in rank_symbols(text)], ["biggest", "first", "second"])

    def test_stops_at_next_section(self):
        text = code_section(code_line(0x20, "a.o (.text.inside)")) + code_line(0x4000, "b.o (.text.outside)")
        self.assertEqual([s.name for s in rank_symbols(text)], ["inside"])

    def test_default_count_is_ten(self):
        lines = [code_line(i + 1, f"o.o (.text.f{i})") for i in range(15)]
        ranked = rank_symbols(code_section(*lines))
        self.assertEqual(len(ranked), 10)
        self.assertEqual(ranked[0], SymbolEntry(15, "f14"))

    def test_non_positive_count(self):
        self.assertEqual(rank_symbols(code_section(code_line(0x20, "a.o (.text.x)")), 0), [])

    def test_no_code_section(self):
        self.assertEqual(rank_symbols("SEGMENT ALLOCATION MAP\n"), [])

    def test_sample_map(self):
        ranked = rank_symbols(SAMPLE_MAP.read_text())
        self.assertEqual(ranked, [
            SymbolEntry(0x420, "RCL_Handler_BLE5_adv"),
            SymbolEntry(0x420, "appMain"),
            SymbolEntry(0x80, "SetupTrimDevice"),
            SymbolEntry(0x10, "memcpy16"),
            SymbolEntry(0x6, "pre_init.o"),
        ])
