"""Classify a list of colours in order — one answer per colour.

Modes:
  exact     colour is a printable palette entry (default)
  near      exact, or within squared distance 1089 of an entry
  cube      raw components inside [0, 1]; ignores the palette
  closest   the closest printable colours resolve to palette entries

Answer i always belongs to colour i, so the output lines up with the
colour list shown in the editor.

Example:
    mandprint batch '#004924' '#010101' 0.5,0.5,0.5 --mode near
"""

from mandprint.core.classify import batch_classify
from mandprint.core.types import Command, Hue, Report

command = Command(
    name='batch',
    help='Ordered printable/not-printable answers for a list of colours.',
)


@command.run
def run(hues: list[Hue], report: Report, args) -> None:
    mode = getattr(args, 'mode', None) or 'exact'
    answers = batch_classify(hues, mode)
    for index, (hue, printable) in enumerate(zip(hues, answers)):
        report.add(hue.key, 'batch', {'index': index, 'mode': mode, 'printable': printable})
        if printable:
            report.record_printable(hue.key)
        else:
            report.record_unprintable(hue.key)
