import tensorflow.compat.v1 as tf

from chipdet.model_config import ClassifierModelConfig, DetectorModelConfig


class ModelConfigTest(tf.test.TestCase):

  def test_classifier_defaults(self):
    config = ClassifierModelConfig(model_dir='/models/inception5h')
    self.assertEqual(config.graph_file_path, '/models/inception5h/tensorflow_inception_graph.pb')
    self.assertEqual(config.labels_file_path, '/models/inception5h/labels.txt')
    self.assertEqual((config.input_node, config.output_nodes), ('input', ['output']))
    self.assertEqual(config.size, [224, 224])
    self.assertEqual((config.mean, config.scale), (117.0, 1.0))

  def test_classifier_overrides(self):
    config = ClassifierModelConfig(model_dir='/m', model_name='mobilenet', input_width=128,
                                   input_height=96, mean=127.5, scale=127.5, input_node=None)
    self.assertEqual(config.graph_file_path, '/m/mobilenet.pb')
    self.assertEqual(config.size, [96, 128])
    self.assertEqual((config.mean, config.scale), (127.5, 127.5))
    self.assertEqual(config.input_node, 'input')

  def test_detector_defaults(self):
    config = DetectorModelConfig(model_dir='/models/multires')
    self.assertEqual(config.graph_file_path, '/models/multires/multires.pb')
    self.assertEqual(config.input_node, 'image_tensor')
    self.assertEqual(config.output_nodes,
                     ['detection_boxes', 'detection_scores', 'detection_classes', 'num_detections'])
    self.assertEqual(config.chip_size, (300, 300))
    self.assertEqual((config.label_policy, config.num_workers, config.min_score), ('abort', 1, 0.0))
    self.assertIsNone(config.chip_dir)

  def test_detector_validation(self):
    with self.assertRaises(ValueError):
      DetectorModelConfig(model_dir='/m', label_policy='ignore')
    with self.assertRaises(ValueError):
      DetectorModelConfig(model_dir='/m', num_workers=0)

  def test_str(self):
    self.assertIn('chip_width=300', str(DetectorModelConfig(model_dir='/m')))


if __name__ == '__main__':
  tf.test.main()
