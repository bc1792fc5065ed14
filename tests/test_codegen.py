import io

from codi.codegen import CodeWriter, DEFAULT_TAB_STRING


def test_all_writer_methods_do_not_raise() -> None:
    cw = CodeWriter()
    cw.write_line_with_comma("test")
    cw.write_line_with_semicolon("test")
    cw.start_collection()
    cw.end_collection()
    cw.end_collection_with_comma()
    cw.end_collection_with_semicolon()
    cw.start_block()
    cw.end_block()
    cw.end_block_with_comma()
    cw.end_block_with_semicolon()
    cw.initialize_indent()
    cw.write_with_comma("test")
    assert cw.getvalue()
    assert cw.depth == 0


def test_default_tab_string_is_a_tab() -> None:
    assert DEFAULT_TAB_STRING == "\t"
    assert CodeWriter().indent == "\t"


def test_initialize_indent_writes_tabs() -> None:
    cw = CodeWriter(base_indent=3)
    cw.initialize_indent()
    assert cw.getvalue() == DEFAULT_TAB_STRING * 3


def test_first_line_is_not_indented() -> None:
    cw = CodeWriter(base_indent=2)
    cw.write_line("a")
    cw.write_line("b")
    assert cw.getvalue() == "a\n\t\tb\n"


def test_block_punctuation_variants() -> None:
    cw = CodeWriter()
    cw.start_block()
    cw.write_line_with_comma("x = 1")
    cw.end_block_with_comma()
    cw.start_block()
    cw.end_block_with_semicolon()
    cw.start_block()
    cw.end_block()
    assert cw.getvalue() == "{\n\tx = 1,\n},\n{\n};\n{\n}\n"


def test_collection_opens_on_its_own_line() -> None:
    cw = CodeWriter()
    cw.write("items = ")
    cw.start_collection()
    cw.write_line_with_comma('"a"')
    cw.end_collection_with_comma()
    assert cw.getvalue() == 'items = \n[\n\t"a",\n],\n'


def test_collection_semicolon() -> None:
    cw = CodeWriter()
    cw.start_collection()
    cw.write_line_with_comma(1)
    cw.end_collection_with_semicolon()
    assert cw.getvalue() == "\n[\n\t1,\n];\n"


def test_write_with_comma_stays_on_line() -> None:
    cw = CodeWriter()
    cw.write("a = ")
    cw.write_with_comma(5)
    assert cw.getvalue() == "a = 5,"


def test_depth_never_negative() -> None:
    cw = CodeWriter()
    cw.end_block()
    cw.end_collection()
    assert cw.depth == 0
    cw.depth = -4
    assert cw.depth == 0
    assert CodeWriter(base_indent=-1).depth == 0


def test_nested_depth_is_restored() -> None:
    cw = CodeWriter()
    cw.start_block()
    cw.start_collection()
    cw.start_block()
    assert cw.depth == 3
    cw.end_block_with_comma()
    cw.end_collection_with_comma()
    cw.end_block_with_semicolon()
    assert cw.depth == 0


def test_context_managers_pair_start_and_end() -> None:
    cw = CodeWriter(indent="  ")
    with cw.block():
        cw.write_line("x")
        with cw.collection():
            cw.write_line_with_comma(1)
    assert cw.depth == 0
    assert cw.getvalue() == "{\n  x\n  \n  [\n    1,\n  ]\n}\n"


def test_writes_to_given_stream() -> None:
    buf = io.StringIO()
    cw = CodeWriter(buf)
    cw.write_line_with_semicolon("done")
    assert buf.getvalue() == "done;\n"
