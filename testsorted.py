#! /usr/bin/python3

# Copyright (c) 2026 by the testsorted authors
# Licensed "as is", with NO WARRANTIES, under the GNU General Public License v3.0

""" Fake test binary: prints a numerically sorted case list or a passing run. """

from decimal import Decimal
from enum import Enum
from typing import Generator, Iterable, List, Optional, TextIO, Tuple
import io
import logging
import os
import re
import sys

logger = logging.getLogger()

theVersion = '0.1.0'

theLogName = 'LOG'

################ TYPES ####################

FilePath = str
Line = str
SortKey = Tuple[int, Decimal]

###########################################

theDebugLogFormat = '%(filename)s[%(lineno)d]: %(message)s'
theLogFormat = '%(message)s'

# Input bytes pass through to stdout unchanged
theEncoding = 'utf-8'
theEncodingErrors = 'surrogateescape'

theLabelFormat = 'TEST: %s'
theCaseFormat = "Test case '%s'.."
thePassLine = '  Pass (Result image matches reference)'
theDoneLine = 'DONE!'

# Mirrors the default IFS of a shell `read`
theBlanks = ' \t'

# Lines without a number sort before every line that has one
theMinimumKey: SortKey = (0, Decimal(0))

###########################################

class SortedError(Exception):
    def __init__(self, message: str, returncode: int = 1):
        super(SortedError, self).__init__(message)
        self.returncode = returncode


class FileAccessError(SortedError):
    pass


class Mode(Enum):
    LABEL = 'label'
    CHECK = 'check'

    @staticmethod
    def fromArgCount(count: int) -> 'Mode':
        """ Exactly two arguments selects the case list, anything else a run. """
        return Mode.LABEL if count == 2 else Mode.CHECK


###########################################

_number = re.compile('[ \t]*(-?(?:[0-9]+(?:\\.[0-9]*)?|\\.[0-9]+))')


def numericKey(line: Line) -> SortKey:
    match = _number.match(line)
    if not match:
        return theMinimumKey
    return (1, Decimal(match.group(1)))


def sortLines(lines: Iterable[Line]) -> List[Line]:
    # sorted() is stable, so equal keys keep input order
    return sorted(lines, key=numericKey)


def readLines(filePath: FilePath) -> List[Line]:
    try:
        with open(filePath, 'r', encoding=theEncoding, errors=theEncodingErrors, newline='') as file:
            return [line.rstrip('\n').strip(theBlanks) for line in file]
    except OSError as e:
        raise FileAccessError(str(e))


def sortedLines(filePath: FilePath) -> Generator[Line, None, None]:
    """ Yield the lines of filePath in ascending numeric order.

    The whole file is read and sorted before the first line is yielded,
    so a read failure is raised before anything is emitted.
    """
    lines = readLines(filePath)
    logger.debug('Read %d lines from %s', len(lines), filePath)
    yield from sortLines(lines)


###########################################

def formatLines(lines: Iterable[Line], mode: Mode) -> Generator[str, None, None]:
    for line in lines:
        if mode is Mode.LABEL:
            yield theLabelFormat % (line,)
        else:
            yield theCaseFormat % (line,)
            yield thePassLine

    if mode is Mode.CHECK:
        yield theDoneLine


def writeLines(lines: Iterable[Line], mode: Mode, output: Optional[TextIO] = None) -> None:
    if output is None:
        output = sys.stdout
    for text in formatLines(lines, mode):
        output.write(text + '\n')


###########################################

def run(filePath: FilePath, mode: Mode, output: Optional[TextIO] = None) -> None:
    logger.debug('Sorting %s in %s mode', filePath, mode.value)
    # Read errors surface on the first pull, before any output
    writeLines(sortedLines(filePath), mode, output)


def main(argv: List[str] = sys.argv) -> int:
    level = os.environ.get(theLogName, 'WARN').upper()
    logging.basicConfig(
        level=level,
        format=theDebugLogFormat if level == 'DEBUG' else theLogFormat
    )
    logger.info('testsorted version %s', theVersion)

    if isinstance(sys.stdout, io.TextIOWrapper):
        sys.stdout.reconfigure(encoding=theEncoding, errors=theEncodingErrors)

    mode = Mode.fromArgCount(len(argv) - 1)

    try:
        if len(argv) < 2:
            raise FileAccessError('Missing input file')
        run(argv[1], mode)
    except SortedError as e:
        logger.error(e)
        return e.returncode

    return 0


if __name__ == "__main__":
    sys.exit(main())
