import logging
import pytest

from nanoargs.core.dialect import SHORT_AND_LONG, LONG_WITH_EQUALS, ParserDialect
from nanoargs.core.tokenizer import Partition, partition


class TestPartition:
    """Tests for the single-pass argument partitioner."""

    def test_mixed_positional_and_flags(self, mixed_argv):
        p = partition(mixed_argv, SHORT_AND_LONG)
        assert p.program_name == "prog"
        assert p.positional == ("file1.txt", "file2.txt")
        assert dict(p.flags) == {"--verbose": True}
        assert dict(p.options) == {"--output": "out.txt"}
        assert not p.separator_seen

    def test_separator_forces_positional(self, separator_argv):
        p = partition(separator_argv, SHORT_AND_LONG)
        assert dict(p.options) == {"--input": "file.txt"}
        assert p.positional == ("--not-a-flag", "-x")
        assert not p.flags
        assert p.separator_seen

    def test_only_first_separator_is_consumed(self):
        p = partition(["prog", "--", "a", "--", "b"], SHORT_AND_LONG)
        assert p.positional == ("a", "--", "b")

    def test_flag_before_separator_is_not_given_it_as_value(self):
        p = partition(["prog", "--verbose", "--", "x"], LONG_WITH_EQUALS)
        assert dict(p.flags) == {"--verbose": True}
        assert p.positional == ("x",)

    def test_custom_separator_is_never_a_value(self):
        dialect = ParserDialect(prefixes=("--",), separator="::")
        p = partition(["prog", "--verbose", "::", "--x"], dialect)
        assert dict(p.flags) == {"--verbose": True}
        assert p.positional == ("--x",)

    def test_trailing_flag(self):
        p = partition(["prog", "--verbose", "-d"], SHORT_AND_LONG)
        assert dict(p.flags) == {"--verbose": True, "-d": True}
        assert not p.options

    def test_flag_swallows_following_bare_token(self):
        p = partition(["prog", "--verbose", "file.txt"], SHORT_AND_LONG)
        assert dict(p.options) == {"--verbose": "file.txt"}
        assert p.positional == ()

    def test_equals_join(self):
        p = partition(["prog", "--input=file.txt", "--threads=4", "rest"], LONG_WITH_EQUALS)
        assert dict(p.options) == {"--input": "file.txt", "--threads": "4"}
        assert p.positional == ("rest",)

    def test_equals_join_does_not_consume_next_token(self):
        p = partition(["prog", "--mode=fast", "input.txt"], LONG_WITH_EQUALS)
        assert dict(p.options) == {"--mode": "fast"}
        assert p.positional == ("input.txt",)

    def test_equals_kept_verbatim_when_joining_disabled(self):
        p = partition(["prog", "--input=file.txt"], SHORT_AND_LONG)
        assert dict(p.flags) == {"--input=file.txt": True}

    def test_single_dash_is_positional_for_long_only_dialect(self):
        p = partition(["prog", "--offset", "-5", "-x"], LONG_WITH_EQUALS)
        assert dict(p.options) == {"--offset": "-5"}
        assert p.positional == ("-x",)

    def test_later_option_overwrites_earlier(self):
        p = partition(["prog", "--level", "1", "--level", "2"], SHORT_AND_LONG)
        assert dict(p.options) == {"--level": "2"}

    def test_key_lives_in_one_table(self):
        p = partition(["prog", "--v", "x", "--v"], SHORT_AND_LONG)
        assert dict(p.flags) == {"--v": True}
        assert "--v" not in p.options

        p = partition(["prog", "--v", "--v", "x"], SHORT_AND_LONG)
        assert dict(p.options) == {"--v": "x"}
        assert "--v" not in p.flags

    @pytest.mark.parametrize("argv", [[], None])
    def test_empty_vector(self, argv):
        p = partition(argv, SHORT_AND_LONG)
        assert p == Partition()
        assert p.program_name == ""
        assert p.positional == ()

    def test_program_name_only(self):
        p = partition(["prog"], SHORT_AND_LONG)
        assert p.program_name == "prog"
        assert p.positional == ()

    def test_argc_limits_tokens(self):
        p = partition(["prog", "a", "b", "c"], SHORT_AND_LONG, argc=2)
        assert p.positional == ("a",)

    def test_argc_zero_and_negative(self):
        assert partition(["prog", "a"], SHORT_AND_LONG, argc=0).program_name == ""
        assert partition(["prog", "a"], SHORT_AND_LONG, argc=-3).program_name == ""

    def test_argc_larger_than_vector(self):
        p = partition(["prog", "a"], SHORT_AND_LONG, argc=10)
        assert p.positional == ("a",)

    def test_tokens_are_copied(self):
        argv = ["prog", "a", "--k", "v"]
        p = partition(argv, SHORT_AND_LONG)
        argv[1] = "changed"
        argv.append("--extra")
        assert p.positional == ("a",)
        assert dict(p.options) == {"--k": "v"}

    def test_tables_are_read_only(self, mixed_argv):
        p = partition(mixed_argv, SHORT_AND_LONG)
        with pytest.raises(TypeError):
            p.options["--new"] = "x"
        with pytest.raises(TypeError):
            p.flags["--new"] = True

    def test_every_token_accounted_for(self):
        argv = ["prog", "a", "--k", "v", "-f", "--g=1", "b", "--", "--z", "c"]
        p = partition(argv, LONG_WITH_EQUALS)
        # --k v and --g=1 are options, -f and b are positional, then the separator
        consumed = len(p.positional) + len(p.flags) + len(p.options) + 1 + 1
        assert consumed == len(argv) - 1
        assert p.positional == ("a", "-f", "b", "--z", "c")

    def test_lookup_and_contains(self, mixed_argv):
        p = partition(mixed_argv, SHORT_AND_LONG)
        assert p.lookup("--output") == "out.txt"
        assert p.lookup("--verbose") == ""
        assert p.lookup("--missing") is None
        assert p.contains("--verbose")
        assert p.contains("--output")
        assert not p.contains("file1.txt")

    def test_logs_summary(self, caplog, mixed_argv):
        with caplog.at_level(logging.DEBUG, logger="nanoargs.core.tokenizer"):
            partition(mixed_argv, SHORT_AND_LONG)
        assert "2 positional, 1 flag(s), 1 option(s)" in caplog.text
