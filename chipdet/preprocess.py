import numpy as np
import tensorflow.compat.v1 as tf

from chipdet import ChipdetError


class ImageError(ChipdetError):

  def __init__(self, path, reason):
    super(ImageError, self).__init__('%s: %s' % (path, reason))
    self.path = path


def read_image_bytes(path):
  try:
    with tf.gfile.GFile(path, 'rb') as f:
      return f.read()
  except tf.errors.OpError as e:
    raise ImageError(path, e.message)


class _GraphRunner(object):

  def __init__(self):
    self.graph = tf.Graph()
    with self.graph.as_default():
      self.input = tf.placeholder(tf.string, shape=[])
      self.output = self._build(self.input)
    self.graph.finalize()
    self.session = tf.Session(graph=self.graph)

  def _build(self, jpeg):
    raise NotImplementedError()

  def run(self, jpeg_bytes, source='<bytes>'):
    try:
      return self.session.run(self.output, feed_dict={self.input: jpeg_bytes})
    except tf.errors.InvalidArgumentError as e:
      raise ImageError(source, e.message)

  def close(self):
    self.session.close()

  def __enter__(self):
    return self

  def __exit__(self, *args):
    self.close()


class ImageDecoder(_GraphRunner):
  """Decode JPEG bytes to a uint8 array of shape (height, width, 3)."""

  def _build(self, jpeg):
    return tf.image.decode_jpeg(jpeg, channels=3)


class ImageNormalizer(_GraphRunner):
  """
  Decode JPEG bytes into the float tensor a classification graph expects:
  batch of one, resized to `size` and normalized with (value - mean) / scale.
  """

  def __init__(self, size, mean, scale):
    self.size = size
    self.mean = mean
    self.scale = scale
    super(ImageNormalizer, self).__init__()

  def _build(self, jpeg):
    image = tf.cast(tf.image.decode_jpeg(jpeg, channels=3), tf.float32)
    image = tf.expand_dims(image, 0, name='make_batch')
    image = tf.image.resize_bilinear(image, tf.constant(self.size, dtype=tf.int32))
    return tf.divide(tf.subtract(image, self.mean), self.scale)


def chip_batch(chip_image):
  """Add the batch dimension a detection graph's `image_tensor` expects."""
  return np.expand_dims(chip_image, 0)
