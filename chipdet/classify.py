"""
Print the most likely label of a JPEG image.

python3 -m chipdet.classify --dir=./models/inception5h --image=./data/grace_hopper.jpg
"""
import tensorflow.compat.v1 as tf

from chipdet import main_wrapper, run_cli
from chipdet.inferrable import Inferrable
from chipdet.labels import read_classification_labels
from chipdet.model_config import ClassifierModelConfig
from chipdet.postprocess import best_match, format_best_match
from chipdet.preprocess import ImageNormalizer, read_image_bytes

tf.flags.DEFINE_integer('input_width', 224, 'Image width the classification graph was trained with.')
tf.flags.DEFINE_integer('input_height', 224, 'Image height the classification graph was trained with.')
tf.flags.DEFINE_float('mean', 117.0, 'Value subtracted from every channel.')
tf.flags.DEFINE_float('scale', 1.0, 'Value every channel is divided by after subtracting the mean.')
tf.flags.DEFINE_string('input_node', 'input', 'Name of the input node.')
tf.flags.DEFINE_string('output_node', 'output', 'Name of the probabilities node.')


def create_config(flags):
  config = ClassifierModelConfig(
    model_dir=flags.dir, model_name=flags.model_name,
    input_node=flags.input_node, output_nodes=[flags.output_node],
    input_width=flags.input_width, input_height=flags.input_height,
    mean=flags.mean, scale=flags.scale)
  tf.logging.info('using config: %s', config)
  return config


def classify(config, image_path, labels):
  with Inferrable(config.graph_file_path, config.input_node, config.output_nodes) as model, \
      ImageNormalizer(config.size, config.mean, config.scale) as normalizer:
    tensor = normalizer.run(read_image_bytes(image_path), image_path)
    probabilities, = model.infer(tensor)
  return best_match(probabilities[0], labels)


def run(flags):
  config = create_config(flags)
  labels = read_classification_labels(config.labels_file_path)
  label, probability = classify(config, flags.image, labels)
  print(format_best_match(label, probability))


main = main_wrapper(run)


def cli():
  run_cli(main)


if __name__ == "__main__":
  cli()
