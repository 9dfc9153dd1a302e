import tensorflow.compat.v1 as tf
from google.protobuf.message import DecodeError

from chipdet import ChipdetError


class ModelLoadError(ChipdetError):

  def __init__(self, path, reason):
    super(ModelLoadError, self).__init__('%s: %s' % (path, reason))
    self.path = path


class Inferrable(object):
  """
  A serialized GraphDef imported into its own graph and session, fed through
  one named input and fetched through a fixed list of named outputs.
  """

  def __init__(self, graph_file_path, input_node_name, output_node_names):
    self.graph_file_path = graph_file_path
    self.graph = tf.Graph()

    graph_def = tf.GraphDef()
    try:
      with tf.gfile.GFile(graph_file_path, 'rb') as f:
        graph_def.ParseFromString(f.read())
    except tf.errors.OpError as e:
      raise ModelLoadError(graph_file_path, e.message)
    except DecodeError as e:
      raise ModelLoadError(graph_file_path, 'not a serialized GraphDef: %s' % e)

    try:
      with self.graph.as_default():
        tf.import_graph_def(graph_def)
      self.input = self.graph.get_tensor_by_name('import/%s:0' % input_node_name)
      self.outputs = [self.graph.get_tensor_by_name('import/%s:0' % name) for name in output_node_names]
    except (ValueError, KeyError) as e:
      raise ModelLoadError(graph_file_path, e)

    self.graph.finalize()
    self.session = tf.Session(graph=self.graph)
    tf.logging.info('loaded graph %s: %s -> %s', graph_file_path, input_node_name, output_node_names)

  def infer(self, input_data):
    return self.session.run(self.outputs, feed_dict={self.input: input_data})

  def close(self):
    self.session.close()

  def __enter__(self):
    return self

  def __exit__(self, *args):
    self.close()
