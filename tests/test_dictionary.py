import pytest

from phraseconv.dictionary import iter_entries, load_entries, load_index, load_string, parse_line


def test_parse_line_uses_first_alternative():
    assert parse_line("干\t幹 乾 干\n") == ("干", "幹")
    assert parse_line("头发\t頭髮\r\n") == ("头发", "頭髮")


def test_parse_line_without_tab_is_ignored():
    assert parse_line("") is None
    assert parse_line("\n") is None
    assert parse_line("no tab here") is None


def test_parse_line_keeps_empty_columns():
    assert parse_line("A\t") == ("A", "")
    assert parse_line("\tB") == ("", "B")


def test_parse_line_keeps_leading_feff():
    assert parse_line("\ufeffA\tB") == ("\ufeffA", "B")


def test_bom_is_stripped_from_first_line_only(tmp_path):
    path = tmp_path / "dict.txt"
    path.write_text("\ufeff万\t萬\n\ufeffA\tB\n", encoding="utf-8")
    assert load_entries(path) == [("万", "萬"), ("\ufeffA", "B")]

    index = load_string("\ufeff万\t萬\n\ufeffA\tB\n")
    assert index.get("万") == "萬"
    assert index.get("\ufeffA") == "B"


def test_iter_entries_is_lazy_and_ordered():
    lines = iter(["A\t1", "junk", "B\t2 3", "A\t4"])
    entries = iter_entries(lines)
    assert next(entries) == ("A", "1")
    assert list(entries) == [("B", "2"), ("A", "4")]


def test_load_string_builds_index():
    index = load_string("\nA\ta\n\tskipped\nAB\tx y\n")
    assert len(index) == 2
    assert index.get("AB") == "x"
    assert index.skipped == 1


def test_load_entries_skips_undecodable_lines(tmp_path):
    path = tmp_path / "dict.txt"
    path.write_bytes("头\t頭\n".encode("utf-8") + b"\xff\xfe\tbad\n" + "发\t發 髮\n".encode("utf-8"))
    assert load_entries(path) == [("头", "頭"), ("发", "發")]


def test_load_entries_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_entries(tmp_path / "missing.txt")


def test_load_index_concatenates_files_in_order(tmp_path):
    characters = tmp_path / "STCharacters.txt"
    phrases = tmp_path / "STPhrases.txt"
    characters.write_text("发\t發 髮\n头\t頭\n", encoding="utf-8")
    phrases.write_text("头发\t頭髮\n发\t髮\n", encoding="utf-8")

    index = load_index([characters, phrases])
    assert len(index) == 3
    # later file overrides the same source phrase
    assert index.get("发") == "髮"
    assert index.get("头发") == "頭髮"
