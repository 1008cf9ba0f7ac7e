from pathlib import Path

from conftest import COMPUTEM_XYZ, STANDARD_XYZ
from convertxyz.parsers import read_computem, read_standard
from convertxyz.records import CellBounds
from convertxyz.transformers import ForwardTransformer, ReverseTransformer
from convertxyz.writers import output_path, render_computem, render_standard


def test_render_computem():

    records = ForwardTransformer().transform(
        read_standard(STANDARD_XYZ.splitlines())
    )

    assert render_computem(records, CellBounds(5.0, 3.2, 1.1)) == [
        '3, silicon oxycarbide fragment',
        '  5.0   3.2   1.1',
        '14   0.0   0.0   0.0   1   0.08',
        '8   5.0   1.0   1.1   1   0.08',
        '6   2.5   3.2   0.5   1   0.08',
        '-1'
    ]


def test_render_computem_with_literal_cell():

    records = read_standard(['0', 'empty'])
    cell = CellBounds(10.0, 10.0, 10.0, text = ('10', '10', '10'))

    assert render_computem(records, cell) == [
        '0, empty', '  10   10   10', '-1'
    ]


def test_render_standard():

    records = ReverseTransformer().transform(
        read_computem(COMPUTEM_XYZ.splitlines())
    )

    assert render_standard(records) == [
        '3',
        'silicon oxycarbide fragment',
        'Si   0.0   0.0   0.0',
        'O   5.0   1.0   1.1',
        'C   2.5   3.2   0.5'
    ]


def test_output_path():

    input_f = Path('data') / 'structures' / 'si.xyz'

    assert output_path(input_f) == Path('data/structures/si-computem.xyz')
    assert output_path(input_f, reverse = True) == Path(
        'data/structures/si-std.xyz'
    )
    assert output_path(input_f, output_dir = Path('out')) == Path(
        'out/si-computem.xyz'
    )
