import sys

import tensorflow.compat.v1 as tf
from absl import app

FLAGS = tf.flags.FLAGS

LOG_LEVELS = ['debug', 'info', 'warn', 'error', 'fatal']

tf.flags.DEFINE_enum('log_level', 'info', LOG_LEVELS, 'Log level.')
tf.flags.DEFINE_string('dir', None, 'Directory containing the trained model and labels.')
tf.flags.DEFINE_string('image', None, 'Path of a JPEG image to run inference on.')
tf.flags.DEFINE_string('model_name', None,
                       'Graph file name inside --dir, without the `.pb` suffix. '
                       'Defaults to the model type specific name.')


class ChipdetError(Exception):
  pass


def set_log_level(log_level):
  tf.logging.set_verbosity(getattr(tf.logging, log_level.upper()))


def main_wrapper(run):
  """
  Turn a `run(flags)` function into an `app.run` compatible main which
  reports library errors and exits with a non-zero status.
  """
  def main(_):
    set_log_level(FLAGS.log_level)
    try:
      run(FLAGS)
    except ChipdetError as e:
      tf.logging.error('%s', e)
      return 1
    except tf.errors.OpError as e:
      tf.logging.error('inference failed: %s', e.message)
      return 1
    return 0
  return main


def parse_flags_with_usage(argv):
  """Parse flags, printing usage and exiting with status 1 on a bad or missing flag."""
  try:
    return FLAGS(argv)
  except tf.flags.Error as e:
    sys.stderr.write('FATAL Flags parsing error: %s\n' % e)
    app.usage(shorthelp=True, exitcode=1)


def run_cli(main):
  tf.flags.mark_flags_as_required(['dir', 'image'])
  app.run(main, flags_parser=parse_flags_with_usage)
