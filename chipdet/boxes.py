class Rect(object):

  attrs = 'min_x min_y max_x max_y'.split()

  def __init__(self, min_x, min_y, max_x, max_y):
    self.min_x = min_x
    self.min_y = min_y
    self.max_x = max_x
    self.max_y = max_y

  def __eq__(self, other):
    return type(self) is type(other) and all(
      [getattr(self, name) == getattr(other, name) for name in Rect.attrs])

  def __ne__(self, other):
    return not self == other

  def __str__(self):
    return '(%s,%s)-(%s,%s)' % (self.min_x, self.min_y, self.max_x, self.max_y)

  __repr__ = __str__


def transform_box(chip_x, chip_y, box, chip_size):
  """
  Map a normalized, chip local box to whole image pixels.

  box[0] and box[2] are scaled by the chip width, box[1] and box[3] by the chip
  height. Values are rounded to the nearest pixel and not clamped, so boxes leaking
  out of [0, 1] end up outside the chip.
  """
  chip_width, chip_height = chip_size
  #     chip pos                      ->  image pos
  min_x = int(round(box[0] * chip_width)) + chip_x * chip_width
  max_x = int(round(box[2] * chip_width)) + chip_x * chip_width
  min_y = int(round(box[1] * chip_height)) + chip_y * chip_height
  max_y = int(round(box[3] * chip_height)) + chip_y * chip_height
  return Rect(min_x, min_y, max_x, max_y)
