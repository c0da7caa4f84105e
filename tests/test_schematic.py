"""
Test script for the schematic tokenizer and validator

Covers:
1. Line tokenization and token spans
2. Grid indexing
3. Part-number and gear checks on the sample schematic
4. Boundary rows, sparse grids and malformed input

Usage:
    python tests/test_schematic.py
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from aoc2023.errors import MalformedLine
from aoc2023.schematic import (
    BlankToken,
    NumberToken,
    SymbolToken,
    build_index,
    find_gears,
    find_part_numbers,
    is_adjacent,
    is_gear_symbol,
    is_part_symbol,
    neighbor_rows,
    sum_gear_ratios,
    sum_part_numbers,
    tokenize_line,
)


SAMPLE = """467..114..
...*......
..35..633.
......#...
617*......
.....+.58.
..592.....
......755.
...$.*....
.664.598.."""


def test_tokenize_line():
    """Test tokenizing a single line into numbers, symbols and filler."""
    print("\n" + "="*60)
    print("TEST: Line Tokenizer")
    print("="*60)

    tokens = tokenize_line("300.400..500%..")
    for token in tokens:
        print(f"  {token}")

    assert tokens == [
        NumberToken(value=300, start=0, length=3),
        BlankToken(start=3, length=1),
        NumberToken(value=400, start=4, length=3),
        BlankToken(start=7, length=2),
        NumberToken(value=500, start=9, length=3),
        SymbolToken(column=12),
        BlankToken(start=13, length=2),
    ]

    # Padding column on each side, clamped at the left edge
    assert list(tokens[0].columns) == [0, 1, 2, 3]
    assert list(tokens[2].columns) == [3, 4, 5, 6, 7]

    print("  [PASS] Line tokenizer tests")


def test_tokenize_gear_mode():
    """Test that only '*' is a symbol when tokenizing for gears."""
    print("\n" + "="*60)
    print("TEST: Gear Tokenizer")
    print("="*60)

    tokens = tokenize_line("12#*..", is_gear_symbol)
    print(f"  {tokens}")

    assert tokens == [
        NumberToken(value=12, start=0, length=2),
        BlankToken(start=2, length=1),
        SymbolToken(column=3),
        BlankToken(start=4, length=2),
    ]

    print("  [PASS] Gear tokenizer tests")


def test_tokenize_digit_runs_are_maximal():
    """Test digit priority and greedy runs next to symbols."""
    print("\n" + "="*60)
    print("TEST: Maximal Digit Runs")
    print("="*60)

    tokens = tokenize_line("#123$")
    print(f"  {tokens}")

    assert tokens == [
        SymbolToken(column=0),
        NumberToken(value=123, start=1, length=3),
        SymbolToken(column=4),
    ]

    print("  [PASS] Maximal digit run tests")


def test_tokenizer_reconstructs_positions():
    """Test that number and symbol spans cover exactly the non-filler columns."""
    print("\n" + "="*60)
    print("TEST: Tokenizer Position Coverage")
    print("="*60)

    for line in SAMPLE.splitlines():
        covered = []
        for token in tokenize_line(line):
            if isinstance(token, NumberToken):
                covered.extend(range(token.start, token.end + 1))
            elif isinstance(token, SymbolToken):
                covered.append(token.column)

        expected = [col for col, char in enumerate(line) if char != "."]
        assert covered == expected, f"{line}: {covered} != {expected}"

    print("  [PASS] Position coverage tests")


def test_tokenize_empty_line():
    """Test that an empty line is rejected."""
    print("\n" + "="*60)
    print("TEST: Empty Line")
    print("="*60)

    try:
        tokenize_line("   ")
    except MalformedLine as e:
        print(f"  Raised: {e}")
    else:
        raise AssertionError("empty line should raise MalformedLine")

    print("  [PASS] Empty line tests")


def test_build_index():
    """Test routing tokens into row-keyed indexes."""
    print("\n" + "="*60)
    print("TEST: Grid Indexer")
    print("="*60)

    index = build_index(SAMPLE, is_part_symbol)
    print(f"  Rows: {index.row_count}")
    print(f"  Numbers: {index.number_count}")
    print(f"  Symbols: {index.symbol_count}")

    assert index.row_count == 10
    assert index.number_count == 10
    assert index.symbol_count == 6
    assert index.symbols == {1: {3}, 3: {6}, 4: {3}, 5: {5}, 8: {3, 5}}
    assert [n.value for n in index.numbers[0]] == [467, 114]
    assert all(n.row == 0 for n in index.numbers[0])
    assert 1 not in index.numbers

    gear_index = build_index(SAMPLE, is_gear_symbol)
    assert gear_index.symbols == {1: {3}, 4: {3}, 8: {5}}

    print("  [PASS] Grid indexer tests")


def test_build_index_blank_row():
    """Test that a blank row aborts indexing of the whole input."""
    print("\n" + "="*60)
    print("TEST: Blank Row")
    print("="*60)

    try:
        build_index("467..\n\n..35.")
    except MalformedLine as e:
        print(f"  Raised: {e}")
        assert e.row == 1
    else:
        raise AssertionError("blank row should raise MalformedLine")

    print("  [PASS] Blank row tests")


def test_neighbor_rows():
    """Test in-bounds neighbor rows at the edges of the grid."""
    print("\n" + "="*60)
    print("TEST: Neighbor Rows")
    print("="*60)

    assert neighbor_rows(0, 3) == [0, 1]
    assert neighbor_rows(1, 3) == [0, 1, 2]
    assert neighbor_rows(2, 3) == [1, 2]
    assert neighbor_rows(0, 1) == [0]
    assert neighbor_rows(5) == [4, 5, 6]

    print("  [PASS] Neighbor row tests")


def test_is_adjacent():
    """Test the adjacency predicate, including its vertical symmetry."""
    print("\n" + "="*60)
    print("TEST: Adjacency")
    print("="*60)

    number = NumberToken(value=35, start=2, length=2, row=2)

    # Diagonals and sides
    assert is_adjacent(number, 1, 1)
    assert is_adjacent(number, 3, 4)
    assert is_adjacent(number, 2, 1)
    assert is_adjacent(number, 2, 4)

    # Out of reach
    assert not is_adjacent(number, 2, 5)
    assert not is_adjacent(number, 0, 2)
    assert not is_adjacent(number, 4, 3)

    # Symbol above a number is adjacent iff symbol below a mirrored number is
    for column in range(0, 7):
        above = NumberToken(value=35, start=2, length=2, row=1)
        below = NumberToken(value=35, start=2, length=2, row=3)
        assert is_adjacent(above, 2, column) == is_adjacent(below, 2, column)

    print("  [PASS] Adjacency tests")


def test_part_numbers_sample():
    """Test the part-number sum on the sample schematic."""
    print("\n" + "="*60)
    print("TEST: Part Numbers (Sample)")
    print("="*60)

    index = build_index(SAMPLE, is_part_symbol)
    parts = find_part_numbers(index)
    print(f"  Parts: {[p.value for p in parts]}")

    assert [p.value for p in parts] == [467, 35, 633, 617, 592, 755, 664, 598]
    assert sum_part_numbers(index) == 4361

    print("  [PASS] Part number tests")


def test_part_numbers_mixed():
    """Test same-row, diagonal and leading-zero numbers."""
    print("\n" + "="*60)
    print("TEST: Part Numbers (Mixed)")
    print("="*60)

    grid = "..123%..22..*\n/.32.....$.09"
    index = build_index(grid, is_part_symbol)
    parts = find_part_numbers(index)
    print(f"  Parts: {[(p.value, p.row) for p in parts]}")

    # 32 touches neither '%' above nor '/' two columns away
    assert [p.value for p in parts] == [123, 22, 9]
    assert sum_part_numbers(index) == 154

    print("  [PASS] Mixed part number tests")


def test_boundary_rows():
    """Test numbers on the first and last rows."""
    print("\n" + "="*60)
    print("TEST: Boundary Rows")
    print("="*60)

    assert sum_part_numbers(build_index("5*", is_part_symbol)) == 5
    assert sum_part_numbers(build_index("1.\n..\n.#", is_part_symbol)) == 0
    assert sum_part_numbers(build_index("#.\n.7", is_part_symbol)) == 7
    assert sum_part_numbers(build_index("7.\n.#", is_part_symbol)) == 7

    print("  [PASS] Boundary row tests")


def test_sparse_grid():
    """Test that grids without symbols sum to zero."""
    print("\n" + "="*60)
    print("TEST: Sparse Grid")
    print("="*60)

    grid = "123\n456"
    assert sum_part_numbers(build_index(grid, is_part_symbol)) == 0
    assert sum_gear_ratios(build_index(grid, is_gear_symbol)) == 0
    assert sum_gear_ratios(build_index("..*..", is_gear_symbol)) == 0

    print("  [PASS] Sparse grid tests")


def test_gear_ratios_sample():
    """Test the gear-ratio sum on the sample schematic."""
    print("\n" + "="*60)
    print("TEST: Gear Ratios (Sample)")
    print("="*60)

    index = build_index(SAMPLE, is_gear_symbol)
    gears = find_gears(index)
    for gear in gears:
        print(f"  Gear at ({gear.row},{gear.column}): "
              f"{[p.value for p in gear.parts]} -> {gear.ratio}")

    assert [(g.row, g.column) for g in gears] == [(1, 3), (8, 5)]
    assert [g.ratio for g in gears] == [16345, 451490]
    assert sum_gear_ratios(index) == 467835
    assert sum_gear_ratios(index, strict=True) == 467835

    print("  [PASS] Gear ratio tests")


def test_gear_with_three_numbers():
    """Test the two-or-more rule against the exactly-two rule."""
    print("\n" + "="*60)
    print("TEST: Gear With Three Numbers")
    print("="*60)

    grid = "1.2\n.*.\n..3"
    index = build_index(grid, is_gear_symbol)

    gears = find_gears(index)
    assert len(gears) == 1
    assert [p.value for p in gears[0].parts] == [1, 2, 3]
    assert sum_gear_ratios(index) == 6
    assert sum_gear_ratios(index, strict=True) == 0

    # A single adjacent number never qualifies
    assert sum_gear_ratios(build_index("4*..", is_gear_symbol)) == 0

    print("  [PASS] Three-number gear tests")


def test_vertical_mirror():
    """Test that mirroring the grid vertically keeps both sums."""
    print("\n" + "="*60)
    print("TEST: Vertical Mirror")
    print("="*60)

    mirrored = "\n".join(reversed(SAMPLE.splitlines()))
    assert sum_part_numbers(build_index(mirrored, is_part_symbol)) == 4361
    assert sum_gear_ratios(build_index(mirrored, is_gear_symbol)) == 467835

    print("  [PASS] Vertical mirror tests")


def main():
    """Run all tests."""
    print("\n" + "#"*60)
    print("# SCHEMATIC TESTS")
    print("#"*60)

    tests = [
        ("Line Tokenizer", test_tokenize_line),
        ("Gear Tokenizer", test_tokenize_gear_mode),
        ("Maximal Digit Runs", test_tokenize_digit_runs_are_maximal),
        ("Position Coverage", test_tokenizer_reconstructs_positions),
        ("Empty Line", test_tokenize_empty_line),
        ("Grid Indexer", test_build_index),
        ("Blank Row", test_build_index_blank_row),
        ("Neighbor Rows", test_neighbor_rows),
        ("Adjacency", test_is_adjacent),
        ("Part Numbers (Sample)", test_part_numbers_sample),
        ("Part Numbers (Mixed)", test_part_numbers_mixed),
        ("Boundary Rows", test_boundary_rows),
        ("Sparse Grid", test_sparse_grid),
        ("Gear Ratios (Sample)", test_gear_ratios_sample),
        ("Three-Number Gear", test_gear_with_three_numbers),
        ("Vertical Mirror", test_vertical_mirror),
    ]

    results = []
    for name, test in tests:
        try:
            test()
            results.append((name, True))
        except AssertionError as e:
            print(f"  [FAIL] {e}")
            results.append((name, False))

    print("\n" + "="*60)
    print("SUMMARY")
    print("="*60)

    all_passed = True
    for name, passed in results:
        status = "PASS" if passed else "FAIL"
        print(f"  {name}: [{status}]")
        if not passed:
            all_passed = False

    print()
    if all_passed:
        print("All tests PASSED!")
        return 0
    else:
        print("Some tests FAILED!")
        return 1


if __name__ == "__main__":
    sys.exit(main())
