import os

import numpy as np
import tensorflow.compat.v1 as tf

from chipdet import test_helper
from chipdet.preprocess import ImageDecoder, ImageError, ImageNormalizer, chip_batch, read_image_bytes


class PreprocessTest(tf.test.TestCase):

  def _jpeg_bytes(self, width, height, color):
    path = test_helper.write_jpeg(os.path.join(self.get_temp_dir(), 'image.jpg'), width, height, color)
    return read_image_bytes(path)

  def test_decode(self):
    with ImageDecoder() as decoder:
      image = decoder.run(self._jpeg_bytes(40, 30, (200, 200, 200)))
    self.assertEqual(image.shape, (30, 40, 3))
    self.assertEqual(image.dtype, np.uint8)
    self.assertAllClose(image, np.full((30, 40, 3), 200), atol=2)

  def test_normalize(self):
    with ImageNormalizer([224, 224], 117.0, 1.0) as normalizer:
      tensor = normalizer.run(self._jpeg_bytes(50, 80, (117, 117, 117)))
    self.assertEqual(tensor.shape, (1, 224, 224, 3))
    self.assertEqual(tensor.dtype, np.float32)
    self.assertAllClose(tensor, np.zeros((1, 224, 224, 3)), atol=2)

  def test_normalize_scale(self):
    with ImageNormalizer([10, 20], 0.0, 255.0) as normalizer:
      tensor = normalizer.run(self._jpeg_bytes(40, 40, (255, 255, 255)))
    self.assertEqual(tensor.shape, (1, 10, 20, 3))
    self.assertAllClose(tensor, np.ones((1, 10, 20, 3)), atol=0.01)

  def test_invalid_jpeg(self):
    with ImageDecoder() as decoder:
      with self.assertRaises(ImageError) as cm:
        decoder.run(b'not a jpeg', 'broken.jpg')
    self.assertEqual(cm.exception.path, 'broken.jpg')

  def test_missing_image(self):
    with self.assertRaises(ImageError):
      read_image_bytes(os.path.join(self.get_temp_dir(), 'missing.jpg'))

  def test_chip_batch(self):
    self.assertEqual(chip_batch(np.zeros((300, 300, 3), dtype=np.uint8)).shape, (1, 300, 300, 3))


if __name__ == '__main__':
  tf.test.main()
