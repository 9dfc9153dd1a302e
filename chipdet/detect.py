"""
Run an object detection graph over a large JPEG image, one fixed size chip at
a time, and print one line per detection:

  min_x min_y max_x max_y class_id confidence

python3 -m chipdet.detect --dir=./models/multires --image=./data/aerial.jpg --num_workers=4
"""
from concurrent.futures import ThreadPoolExecutor

import tensorflow.compat.v1 as tf

from chipdet import ChipdetError, main_wrapper, run_cli
from chipdet.inferrable import Inferrable
from chipdet.labels import read_detection_labels
from chipdet.model_config import DetectorModelConfig
from chipdet.postprocess import detections_from_output, format_detection
from chipdet.preprocess import ImageDecoder, chip_batch, read_image_bytes
from chipdet.tiler import save_chips, tile_image

tf.flags.DEFINE_integer('chip_width', 300, 'Chip width, the detection graph input width.')
tf.flags.DEFINE_integer('chip_height', 300, 'Chip height, the detection graph input height.')
tf.flags.DEFINE_integer('num_workers', 1, 'Number of chips to run inference on concurrently.', lower_bound=1)
tf.flags.DEFINE_enum('label_policy', 'abort', DetectorModelConfig.label_policies,
                     'What to do with malformed label rows: abort or skip with a warning.')
tf.flags.DEFINE_string('chip_dir', None, 'If set, every chip is also written there as chip-<i>.png.')
tf.flags.DEFINE_float('min_score', 0.0, 'Detections scoring below are not printed.')
tf.flags.DEFINE_bool('print_labels', False, 'Append the label description to every detection line.')


class ImageTooSmallError(ChipdetError):
  pass


def create_config(flags):
  config = DetectorModelConfig(
    model_dir=flags.dir, model_name=flags.model_name,
    chip_width=flags.chip_width, chip_height=flags.chip_height,
    num_workers=flags.num_workers, label_policy=flags.label_policy,
    chip_dir=flags.chip_dir, min_score=flags.min_score)
  tf.logging.info('using config: %s', config)
  return config


def read_chips(config, image_path):
  with ImageDecoder() as decoder:
    image = decoder.run(read_image_bytes(image_path), image_path)

  chips = tile_image(image, config.chip_size)
  tf.logging.info('image %s of %sx%s split into %s chips of %sx%s',
                  image_path, image.shape[1], image.shape[0], len(chips), *config.chip_size)
  if not chips:
    raise ImageTooSmallError('%s: image of %sx%s is smaller than one %sx%s chip' % (
      image_path, image.shape[1], image.shape[0], config.chip_width, config.chip_height))

  if config.chip_dir:
    save_chips(chips, config.chip_dir)
    tf.logging.info('chips saved to %s', config.chip_dir)
  return chips


def detect(config, image_path, labels=None):
  """
  Yields:
    list of Detection per chip, chips in row-major order whatever the number
    of workers.
  """
  with Inferrable(config.graph_file_path, config.input_node, config.output_nodes) as model:
    chips = read_chips(config, image_path)

    def infer(chip):
      boxes, scores, classes, num_detections = model.infer(chip_batch(chip.image))
      detections = detections_from_output(
        chip, config.chip_size, boxes[0], scores[0], classes[0], num_detections[0],
        labels=labels, min_score=config.min_score)
      tf.logging.debug('chip (%s, %s): %s detections', chip.x, chip.y, len(detections))
      return detections

    if config.num_workers == 1:
      for chip in chips:
        yield infer(chip)
    else:
      with ThreadPoolExecutor(max_workers=config.num_workers) as executor:
        for detections in executor.map(infer, chips):
          yield detections


def run(flags):
  config = create_config(flags)
  labels = read_detection_labels(config.labels_file_path, config.label_policy)
  for detections in detect(config, flags.image, labels):
    for detection in detections:
      print(format_detection(detection, flags.print_labels))


main = main_wrapper(run)


def cli():
  run_cli(main)


if __name__ == "__main__":
  cli()
