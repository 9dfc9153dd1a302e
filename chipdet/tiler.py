import os

from PIL import Image


class Chip(object):

  def __init__(self, x, y, image):
    self.x = x
    self.y = y
    self.image = image

  def __str__(self):
    return 'Chip(x=%s, y=%s, shape=%s)' % (self.x, self.y, self.image.shape)


def grid_size(image_size, chip_size):
  """Number of whole chips along (width, height); remainders are dropped."""
  (width, height), (chip_width, chip_height) = image_size, chip_size
  return width // chip_width, height // chip_height


def tile_image(image, chip_size):
  """
  Split an image into a row-major grid of non-overlapping chips.
  Args:
    image: array of shape (height, width, channels)
    chip_size: (chip_width, chip_height)

  Returns:
    list of Chip, `wn * hn` long, ordered by (y, x). Pixels right of
    `wn * chip_width` or below `hn * chip_height` are in no chip.
  """
  chip_width, chip_height = chip_size
  wn, hn = grid_size((image.shape[1], image.shape[0]), chip_size)

  chips = []
  for i in range(wn * hn):
    x, y = i % wn, i // wn
    left, top = x * chip_width, y * chip_height
    chips.append(Chip(x, y, image[top:top + chip_height, left:left + chip_width]))
  return chips


def save_chips(chips, output_dir):
  if not os.path.isdir(output_dir):
    os.makedirs(output_dir)
  paths = []
  for i, chip in enumerate(chips):
    path = os.path.join(output_dir, 'chip-%s.png' % i)
    Image.fromarray(chip.image).save(path)
    paths.append(path)
  return paths
