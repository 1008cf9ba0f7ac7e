import pytest

from conftest import STANDARD_XYZ, write_xyz
from convertxyz.core import FileStatus, convert, convert_file
from convertxyz.io import load_lines
from convertxyz.parsers import read_standard
from convertxyz.records import ConversionOptions


FORWARD = ConversionOptions(progress = False)
REVERSE = ConversionOptions(reverse = True, progress = False)


def test_convert_file_forward(standard_f):

    result = convert_file(standard_f, FORWARD)

    assert result.ok
    assert result.n_atoms == 3
    assert result.output_f == standard_f.parent / 'fragment-computem.xyz'
    assert load_lines(result.output_f) == [
        '3, silicon oxycarbide fragment',
        '  5.0   3.2   1.1',
        '14   0.0   0.0   0.0   1   0.08',
        '8   5.0   1.0   1.1   1   0.08',
        '6   2.5   3.2   0.5   1   0.08',
        '-1'
    ]
    assert result.output_f.read_text().endswith('-1\n')


def test_convert_file_reverse_counts_atoms_before_sentinel(computem_f):

    result = convert_file(computem_f, REVERSE)

    assert result.output_f == computem_f.parent / 'fragment-std.xyz'
    lines = load_lines(result.output_f)
    assert lines[0] == '3'
    assert lines[1] == 'silicon oxycarbide fragment'
    assert lines[2:] == [
        'Si   0.0   0.0   0.0',
        'O   5.0   1.0   1.1',
        'C   2.5   3.2   0.5'
    ]


def test_round_trip(standard_f, tmp_path):

    forward = convert_file(standard_f, FORWARD)
    reverse = convert_file(
        forward.output_f,
        REVERSE._replace(output_directory = tmp_path / 'std')
    )

    original = read_standard(STANDARD_XYZ.splitlines())
    converted = read_standard(load_lines(reverse.output_f))
    assert [(a.element, a.position) for a in converted.atoms] == [
        (a.element, a.position) for a in original.atoms
    ]


@pytest.mark.parametrize('cell_size, cell_line', [
    ('10,10,10', '  10   10   10'),
    ('10,10', '  5.0   3.2   1.1'),
])
def test_cell_override(standard_f, cell_size, cell_line):

    result = convert_file(standard_f, FORWARD._replace(cell_size = cell_size))

    assert load_lines(result.output_f)[1] == cell_line


def test_invalid_cell_override_warns(standard_f, capsys):

    batch = convert([standard_f], FORWARD._replace(cell_size = '10,10'))

    assert batch.ok
    assert '[WARNING]' in capsys.readouterr().out


def test_output_directory_is_created(standard_f, tmp_path):

    outdir = tmp_path / 'out' / 'computem'
    result = convert_file(standard_f, FORWARD._replace(
        output_directory = outdir
    ))

    assert result.output_f == outdir / 'fragment-computem.xyz'
    assert result.output_f.is_file()


def test_existing_output_is_overwritten(standard_f):

    output_f = standard_f.parent / 'fragment-computem.xyz'
    output_f.write_text('stale\n')

    convert_file(standard_f, FORWARD)

    assert 'stale' not in output_f.read_text()


def test_verbose_echoes_atom_lines(standard_f, capsys):

    convert_file(standard_f, FORWARD._replace(verbose = True))

    out = capsys.readouterr().out
    assert '[VERBOSE] 14   0.0   0.0   0.0   1   0.08' in out
    assert '[VERBOSE] -1' not in out


def test_verbose_prints_options(standard_f, capsys):

    convert([standard_f], FORWARD._replace(verbose = True))

    out = capsys.readouterr().out
    assert '[VERBOSE] thermal_vibration' in out
    assert '[VERBOSE] 8   5.0   1.0   1.1   1   0.08' in out


def test_malformed_file_is_isolated(tmp_path, capsys):

    input_fs = [
        write_xyz(tmp_path / 'a.xyz', STANDARD_XYZ),
        write_xyz(tmp_path / 'b.xyz', '2\nbad\nH 0 0 0\nH 0 0\n'),
        write_xyz(tmp_path / 'c.xyz', STANDARD_XYZ),
    ]

    batch = convert(input_fs, FORWARD)

    assert not batch.ok
    assert batch.fatal is None
    assert [r.status for r in batch.results] == [
        FileStatus.CONVERTED, FileStatus.SKIPPED, FileStatus.CONVERTED
    ]
    assert (tmp_path / 'a-computem.xyz').is_file()
    assert not (tmp_path / 'b-computem.xyz').exists()
    assert (tmp_path / 'c-computem.xyz').is_file()

    out = capsys.readouterr().out
    assert '[ERROR]' in out and 'H 0 0' in out
    assert 'There were error(s) during the conversion.' in out


def test_malformed_file_removes_stale_output(tmp_path):

    input_f = write_xyz(tmp_path / 'b.xyz', '1\nbad\nH 0 0\n')
    (tmp_path / 'b-computem.xyz').write_text('stale\n')

    result = convert_file(input_f, FORWARD)

    assert result.status is FileStatus.SKIPPED
    assert not (tmp_path / 'b-computem.xyz').exists()


def test_unknown_element_aborts_batch(tmp_path, capsys):

    input_fs = [
        write_xyz(tmp_path / 'a.xyz', '1\n\nXx 0 0 0\n'),
        write_xyz(tmp_path / 'b.xyz', STANDARD_XYZ),
    ]

    batch = convert(input_fs, FORWARD)

    assert not batch.ok
    assert 'Xx' in batch.fatal
    assert batch.results == ()
    assert not (tmp_path / 'b-computem.xyz').exists()
    assert 'There were error(s)' in capsys.readouterr().out


def test_unknown_element_skipped_on_request(tmp_path):

    input_fs = [
        write_xyz(tmp_path / 'a.xyz', '1\n\nXx 0 0 0\n'),
        write_xyz(tmp_path / 'b.xyz', STANDARD_XYZ),
    ]

    batch = convert(input_fs, FORWARD._replace(lookup_errors = 'skip'))

    assert batch.fatal is None
    assert [r.ok for r in batch.results] == [False, True]
    assert (tmp_path / 'b-computem.xyz').is_file()


def test_missing_file_aborts_batch(tmp_path, standard_f):

    batch = convert([tmp_path / 'missing.xyz', standard_f], FORWARD)

    assert batch.fatal is not None
    assert batch.results == ()
    assert not (tmp_path / 'fragment-computem.xyz').exists()


def test_successful_batch_summary(standard_f, capsys):

    batch = convert([standard_f], FORWARD)

    assert batch.ok
    assert len(batch.converted) == 1 and not batch.skipped
    out = capsys.readouterr().out
    assert 'operating in the forward mode' in out
    assert '[INFO] No error detected.' in out


def test_byte_order_mark_is_dropped(tmp_path):

    input_f = tmp_path / 'bom.xyz'
    input_f.write_bytes(b'\xef\xbb\xbf' + STANDARD_XYZ.encode('utf-8'))

    result = convert_file(input_f, FORWARD)

    assert load_lines(result.output_f)[0] == '3, silicon oxycarbide fragment'


def test_malformed_file_is_isolated_reverse(tmp_path, capsys):

    good = 'comment\n  1   1   1\n14   0.0   0.0   0.0   1   0.08\n-1\n'
    input_fs = [
        write_xyz(tmp_path / 'a.xyz', good),
        write_xyz(tmp_path / 'b.xyz', 'bad\n\n14   0.0   0.0   0.0\n-1\n'),
        write_xyz(tmp_path / 'c.xyz', good),
    ]

    batch = convert(input_fs, REVERSE)

    assert not batch.ok
    assert batch.fatal is None
    assert [r.ok for r in batch.results] == [True, False, True]
    assert (tmp_path / 'a-std.xyz').is_file()
    assert not (tmp_path / 'b-std.xyz').exists()
    assert load_lines(tmp_path / 'c-std.xyz') == [
        '1', 'comment', 'Si   0.0   0.0   0.0'
    ]
    assert 'There were error(s)' in capsys.readouterr().out


@pytest.mark.parametrize('z', ['0', '200'])
def test_unknown_atomic_number_aborts_batch(tmp_path, z):

    input_fs = [
        write_xyz(tmp_path / 'a.xyz', f'c\n\n{z}   0   0   0   1   0.08\n-1\n'),
        write_xyz(tmp_path / 'b.xyz', 'c\n\n8   0   0   0   1   0.08\n-1\n'),
    ]

    batch = convert(input_fs, REVERSE)

    assert not batch.ok
    assert batch.fatal is not None
    assert batch.results == ()
    assert not (tmp_path / 'a-std.xyz').exists()
    assert not (tmp_path / 'b-std.xyz').exists()
