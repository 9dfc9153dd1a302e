import numpy as np

from chipdet.boxes import transform_box


class Detection(object):

  def __init__(self, bounds, class_id, confidence, chip=None, description=''):
    self.bounds = bounds
    self.class_id = class_id
    self.confidence = confidence
    self.chip = chip
    self.description = description

  def __str__(self):
    return 'Detection(bounds=%s, class_id=%s, confidence=%s, description=%s)' % (
      self.bounds, self.class_id, self.confidence, self.description)


def best_match(probabilities, labels):
  """
  Args:
    probabilities: 1-D sequence with one probability per class
    labels: list of labels, position is the class id

  Returns:
    (label, probability) of the most likely class, the first one wins on ties.
  """
  probabilities = np.asarray(probabilities).reshape(-1)
  if probabilities.size == 0:
    raise ValueError('probabilities must not be empty')
  best_idx = int(np.argmax(probabilities))
  label = labels[best_idx] if best_idx < len(labels) else '<unknown %s>' % best_idx
  return label, probabilities[best_idx]


def format_best_match(label, probability):
  return 'BEST MATCH: (%2.0f%% likely) %s' % (probability * 100.0, label)


def detections_from_output(chip, chip_size, boxes, scores, classes, num_detections=None,
                           labels=None, min_score=0.0):
  """
  Turn one chip's detection graph outputs into image level detections.
  Args:
    chip: the Chip the outputs were computed for
    chip_size: (chip_width, chip_height)
    boxes: (N, 4) normalized boxes of the first batch entry
    scores: (N,) scores
    classes: (N,) class ids, as floats the way detection graphs emit them
    num_detections: number of valid rows, all rows if None
    labels: optional id -> description mapping
    min_score: rows scoring below are dropped

  Returns:
    list of Detection, in output row order
  """
  count = len(scores) if num_detections is None else min(int(num_detections), len(scores))
  labels = labels or {}
  detections = []
  for i in range(count):
    score = scores[i]
    if score < min_score:
      continue
    class_id = int(classes[i])
    detections.append(Detection(
      bounds=transform_box(chip.x, chip.y, boxes[i], chip_size),
      class_id=class_id,
      confidence=np.float32(score),
      chip=chip,
      description=labels.get(class_id, '')))
  return detections


def format_detection(detection, with_description=False):
  b = detection.bounds
  fields = [b.min_x, b.min_y, b.max_x, b.max_y, detection.class_id, detection.confidence]
  if with_description:
    fields.append(detection.description)
  return ' '.join('%s' % field for field in fields)
