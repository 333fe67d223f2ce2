from commentflow.detect.classifier import RULES, is_comment_line, register_rule


def test_hash_languages_only_accept_hash():
    assert is_comment_line("  # note", "python")
    assert is_comment_line("#' @param x", "r")
    assert not is_comment_line("// note", "python")
    assert not is_comment_line("* note", "r")
    assert not is_comment_line("x <- 1  # trailing", "r")


def test_slash_languages():
    assert is_comment_line("// note", "typescript")
    assert is_comment_line("   * continued", "javascript")
    assert is_comment_line("/* opener", "typescript")
    assert not is_comment_line("# note", "javascript")


def test_unknown_content_type_uses_default_rule():
    assert is_comment_line("# note", "cobol")
    assert is_comment_line("// note", None)
    assert is_comment_line("* note", "plaintext")
    assert not is_comment_line("/* note", "plaintext")
    assert not is_comment_line("", "plaintext")


def test_content_type_lookup_ignores_case():
    assert not is_comment_line("// note", "Python")


def test_register_rule_extends_table():
    register_rule("sql", lambda trimmed: trimmed.startswith("--"))
    try:
        assert is_comment_line("  -- select all", "sql")
        assert not is_comment_line("# not sql", "sql")
    finally:
        RULES.pop("sql")
