# std
import io

# third-party
import pytest

# local
from xstring import Text
from xstring.io import print_line, read_line


# ---------------------------------------------------------------------------- #
class TestPrintLine:
    def test_stream(self):
        stream = io.StringIO()
        assert print_line('hello', stream) is stream
        print_line(42, stream, flush=True)
        assert stream.getvalue() == 'hello\n42\n'

    def test_stdout(self, capsys):
        print_line('hello')
        assert capsys.readouterr().out == 'hello\n'

    def test_file(self, tmp_path):
        path = tmp_path / 'out.txt'
        path.write_text('old content\n')
        print_line('hello', path)
        assert path.read_text() == 'hello\n'

        print_line('again', str(path))
        assert path.read_text() == 'again\n'

    def test_text_path(self, tmp_path):
        path = tmp_path / 'out.txt'
        print_line(Text('hello'), Text(str(path)))
        assert path.read_text() == 'hello\n'

        Text('again').print_line(Text(str(path)))
        assert path.read_text() == 'again\n'


# ---------------------------------------------------------------------------- #
class TestReadLine:
    def test_lines(self):
        stream = io.StringIO('one\ntwo\n\nthree')
        assert [read_line(stream) for _ in range(5)] == \
            ['one', 'two', '', 'three', None]

    def test_custom_delimiter(self):
        stream = io.StringIO('a,b,,c')
        assert [read_line(stream, ',') for _ in range(5)] == \
            ['a', 'b', '', 'c', None]

    def test_delimiter_only(self):
        assert read_line(io.StringIO(';'), ';') == ''

    def test_empty(self):
        assert read_line(io.StringIO()) is None
        assert read_line(io.StringIO(), ',') is None

    def test_invalid_delimiter(self):
        with pytest.raises(ValueError):
            read_line(io.StringIO('abc'), '<>')
