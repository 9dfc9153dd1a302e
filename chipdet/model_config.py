import os


class ModelConfig(object):

  attrs = ['model_dir', 'model_name', 'labels_file_name', 'input_node', 'output_nodes']

  def __init__(self, **kwargs):
    self.model_dir = None
    self.model_name = None
    self.labels_file_name = 'labels.txt'
    self.input_node = None
    self.output_nodes = []

    self._set_attrs(ModelConfig.attrs, kwargs)

  def _set_attrs(self, attrs, kwargs):
    for attr in attrs:
      if kwargs.get(attr, None) is None:
        continue
      setattr(self, attr, kwargs[attr])

  def __str__(self):
    return '%s(%s)' % (self.__class__.__name__, ', '.join(
      ['%s=%s' % (attr, value) for attr, value in sorted(vars(self).items())]))

  @property
  def graph_file_path(self):
    return os.path.join(self.model_dir, '%s.pb' % self.model_name)

  @property
  def labels_file_path(self):
    return os.path.join(self.model_dir, self.labels_file_name)


class ClassifierModelConfig(ModelConfig):
  """
  Defaults match the inception5h graph: 224x224 RGB input, each channel
  converted to float using (value - mean) / scale.
  """

  attrs = ['input_width', 'input_height', 'mean', 'scale']

  def __init__(self, **kwargs):
    super(ClassifierModelConfig, self).__init__(**kwargs)
    self.model_name = kwargs.get('model_name') or 'tensorflow_inception_graph'
    self.input_node = kwargs.get('input_node') or 'input'
    self.output_nodes = kwargs.get('output_nodes') or ['output']
    self.input_width = 224
    self.input_height = 224
    self.mean = 117.0
    self.scale = 1.0

    self._set_attrs(ClassifierModelConfig.attrs, kwargs)

  @property
  def size(self):
    return [self.input_height, self.input_width]


class DetectorModelConfig(ModelConfig):

  attrs = ['chip_width', 'chip_height', 'label_policy', 'min_score', 'num_workers', 'chip_dir']
  label_policies = ['abort', 'skip']

  def __init__(self, **kwargs):
    super(DetectorModelConfig, self).__init__(**kwargs)
    self.model_name = kwargs.get('model_name') or 'multires'
    self.input_node = kwargs.get('input_node') or 'image_tensor'
    self.output_nodes = kwargs.get('output_nodes') or [
      'detection_boxes', 'detection_scores', 'detection_classes', 'num_detections']
    self.chip_width = 300
    self.chip_height = 300
    self.label_policy = 'abort'
    self.min_score = 0.0
    self.num_workers = 1
    self.chip_dir = None

    self._set_attrs(DetectorModelConfig.attrs, kwargs)

    if self.label_policy not in self.label_policies:
      raise ValueError('Unsupported label policy: %s' % self.label_policy)
    if self.num_workers < 1:
      raise ValueError('num_workers must be positive: %s' % self.num_workers)

  @property
  def chip_size(self):
    return self.chip_width, self.chip_height
