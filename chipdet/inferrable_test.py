import os

import numpy as np
import tensorflow.compat.v1 as tf

from chipdet import test_helper
from chipdet.inferrable import Inferrable, ModelLoadError


class InferrableTest(tf.test.TestCase):

  def test_infer(self):
    graph_file = test_helper.write_classifier_graph(self.get_temp_dir())
    with Inferrable(graph_file, 'input', ['output']) as inferrable:
      probabilities, = inferrable.infer(np.zeros((1, 224, 224, 3), dtype=np.float32))

    logits = np.array(test_helper.classifier_logits)
    self.assertAllClose(probabilities[0], np.exp(logits) / np.sum(np.exp(logits)))

  def test_infer_multiple_outputs(self):
    graph_file = test_helper.write_detection_graph(self.get_temp_dir())
    with Inferrable(graph_file, 'image_tensor',
                    ['detection_boxes', 'detection_scores', 'detection_classes', 'num_detections']) as inferrable:
      boxes, scores, classes, num_detections = inferrable.infer(np.full((1, 30, 30, 3), 51, dtype=np.uint8))

    self.assertEqual(boxes.shape, (1, 2, 4))
    self.assertAllClose(scores, [[0.2, 0.0]])
    self.assertAllEqual(classes, [[1.0, 2.0]])
    self.assertAllEqual(num_detections, [1.0])

  def test_missing_graph_file(self):
    with self.assertRaises(ModelLoadError) as cm:
      Inferrable(os.path.join(self.get_temp_dir(), 'missing.pb'), 'input', ['output'])
    self.assertIn('missing.pb', str(cm.exception))

  def test_corrupt_graph_file(self):
    graph_file = os.path.join(self.get_temp_dir(), 'corrupt.pb')
    with open(graph_file, 'wb') as f:
      f.write(b'not a graph')
    with self.assertRaises(ModelLoadError):
      Inferrable(graph_file, 'input', ['output'])

  def test_unknown_node(self):
    graph_file = test_helper.write_classifier_graph(self.get_temp_dir(), 'unknown_node')
    with self.assertRaises(ModelLoadError):
      Inferrable(graph_file, 'input', ['probabilities'])


if __name__ == '__main__':
  tf.test.main()
