import re

import tensorflow.compat.v1 as tf

from chipdet import ChipdetError

_CLASS_ID = re.compile(r'^\s*[+-]?[0-9]+\s*$')


class LabelFileError(ChipdetError):

  def __init__(self, path, reason, errors=None):
    super(LabelFileError, self).__init__('%s: %s' % (path, reason))
    self.path = path
    self.errors = errors or []


class LabelParseError(object):

  def __init__(self, line_number, line, reason):
    self.line_number = line_number
    self.line = line
    self.reason = reason

  def __eq__(self, other):
    return type(self) is type(other) and \
           (self.line_number, self.line, self.reason) == (other.line_number, other.line, other.reason)

  def __str__(self):
    return 'line %s: %s (%r)' % (self.line_number, self.reason, self.line)


class LabelParseResult(object):

  def __init__(self, labels, errors):
    self.labels = labels
    self.errors = errors

  @property
  def ok(self):
    return not self.errors


def parse_detection_labels(lines):
  """
  Parse `<id>:<description>` rows, splitting on the first colon.
  Args:
    lines: iterable of text lines, line endings are stripped.

  Returns:
    LabelParseResult holding the rows that parsed and one LabelParseError per
    row that did not. Blank lines are ignored.
  """
  labels, errors = {}, []
  for i, line in enumerate(lines):
    line = line.rstrip('\r\n')
    if not line.strip():
      continue
    if ':' not in line:
      errors.append(LabelParseError(i + 1, line, 'missing ":" separator'))
      continue
    label_id, description = line.split(':', 1)
    if not _CLASS_ID.match(label_id):
      errors.append(LabelParseError(i + 1, line, 'class id is not an integer'))
      continue
    label_id = int(label_id)
    if label_id in labels:
      errors.append(LabelParseError(i + 1, line, 'duplicate class id %s' % label_id))
      continue
    labels[label_id] = description
  return LabelParseResult(labels, errors)


def parse_classification_labels(lines):
  return [line.rstrip('\r\n') for line in lines]


def _read_lines(path):
  try:
    with tf.gfile.GFile(path, 'r') as f:
      return f.read().splitlines()
  except tf.errors.OpError as e:
    raise LabelFileError(path, e.message)
  except UnicodeDecodeError as e:
    raise LabelFileError(path, 'not UTF-8 text: %s' % e)


def read_detection_labels(path, policy='abort'):
  result = parse_detection_labels(_read_lines(path))
  if result.errors:
    if policy == 'abort':
      raise LabelFileError(
        path, 'malformed rows: %s' % '; '.join(str(e) for e in result.errors), result.errors)
    for error in result.errors:
      tf.logging.warning('%s: skipping %s', path, error)
  tf.logging.info('loaded %s labels from %s', len(result.labels), path)
  return result.labels


def read_classification_labels(path):
  labels = parse_classification_labels(_read_lines(path))
  tf.logging.info('loaded %s labels from %s', len(labels), path)
  return labels
