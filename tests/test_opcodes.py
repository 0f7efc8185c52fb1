# =============================================================================
# test_opcodes.py - Instruction Table Tests
# =============================================================================
# Tests for the instruction table: exact opcode bases, operand shapes,
# case-insensitive lookup and the PAD directive helpers.
# =============================================================================

import pytest

from scasm.assembler.opcodes import (
    INSTRUCTION_TABLE,
    MNEMONICS,
    PAD_DIRECTIVE,
    InstructionInfo,
    OperandShape,
    is_directive,
    lookup,
)


EXPECTED_TABLE = {
    "ADD": (0x80, OperandShape.RA_RB),
    "SHR": (0x90, OperandShape.RA_RB),
    "SHL": (0xA0, OperandShape.RA_RB),
    "NOT": (0xB0, OperandShape.RA_RB),
    "AND": (0xC0, OperandShape.RA_RB),
    "OR": (0xD0, OperandShape.RA_RB),
    "XOR": (0xE0, OperandShape.RA_RB),
    "CMP": (0xF0, OperandShape.RA_RB),
    "LD": (0x00, OperandShape.RA_RB),
    "ST": (0x10, OperandShape.RA_RB),
    "DATA": (0x20, OperandShape.RB_K),
    "JMPR": (0x30, OperandShape.RB),
    "JMP": (0x40, OperandShape.K),
    "JC": (0x58, OperandShape.K),
    "JA": (0x54, OperandShape.K),
    "JE": (0x52, OperandShape.K),
    "JZ": (0x51, OperandShape.K),
    "JCA": (0x5C, OperandShape.K),
    "JCE": (0x5A, OperandShape.K),
    "JCZ": (0x59, OperandShape.K),
    "JAE": (0x56, OperandShape.K),
    "JAZ": (0x55, OperandShape.K),
    "JEZ": (0x53, OperandShape.K),
    "JCAE": (0x5E, OperandShape.K),
    "JCAZ": (0x5D, OperandShape.K),
    "JCEZ": (0x5B, OperandShape.K),
    "JAEZ": (0x57, OperandShape.K),
    "JCAEZ": (0x5F, OperandShape.K),
    "CLF": (0x60, OperandShape.NONE),
    "IND": (0x70, OperandShape.RB),
    "INA": (0x74, OperandShape.RB),
    "OUTD": (0x78, OperandShape.RB),
    "OUTA": (0x7C, OperandShape.RB),
}


class TestInstructionTable:
    """Verify the table content bit for bit."""

    def test_table_has_exactly_expected_mnemonics(self):
        assert MNEMONICS == frozenset(EXPECTED_TABLE)
        assert len(INSTRUCTION_TABLE) == 33

    @pytest.mark.parametrize("mnemonic", sorted(EXPECTED_TABLE))
    def test_opcode_and_shape(self, mnemonic):
        opcode, shape = EXPECTED_TABLE[mnemonic]
        info = INSTRUCTION_TABLE[mnemonic]
        assert info.mnemonic == mnemonic
        assert info.opcode == opcode
        assert info.shape is shape

    def test_pad_is_not_an_instruction(self):
        assert PAD_DIRECTIVE not in INSTRUCTION_TABLE
        assert lookup("PAD") is None

    def test_jump_family_sets_flag_bits(self):
        """Conditional jumps are $50 plus one bit per flag (C=8, A=4, E=2, Z=1)."""
        flags = {"C": 0x08, "A": 0x04, "E": 0x02, "Z": 0x01}
        for name, info in INSTRUCTION_TABLE.items():
            if info.shape is not OperandShape.K or name == "JMP":
                continue
            expected = 0x50 | sum(flags[c] for c in name[1:])
            assert INSTRUCTION_TABLE[name].opcode == expected, name

    def test_info_is_immutable(self):
        info = INSTRUCTION_TABLE["ADD"]
        with pytest.raises(AttributeError):
            info.opcode = 0x00


class TestOperandShape:
    """Test operand shape sizes."""

    def test_sizes(self):
        assert OperandShape.RA_RB.size == 1
        assert OperandShape.RB.size == 1
        assert OperandShape.NONE.size == 1
        assert OperandShape.RB_K.size == 2
        assert OperandShape.K.size == 2

    def test_instruction_size_follows_shape(self):
        assert INSTRUCTION_TABLE["DATA"].size == 2
        assert INSTRUCTION_TABLE["JCAEZ"].size == 2
        assert INSTRUCTION_TABLE["CLF"].size == 1


class TestLookup:
    """Test mnemonic lookup."""

    def test_lookup_upper(self):
        assert lookup("JMP") == InstructionInfo("JMP", 0x40, OperandShape.K)

    def test_lookup_is_case_insensitive(self):
        assert lookup("outa") is INSTRUCTION_TABLE["OUTA"]
        assert lookup("Cmp") is INSTRUCTION_TABLE["CMP"]

    def test_lookup_unknown(self):
        assert lookup("NOP") is None
        assert lookup("") is None
        assert lookup("PAD") is None

    def test_is_directive(self):
        assert is_directive("PAD")
        assert is_directive("pad")
        assert not is_directive("ADD")
