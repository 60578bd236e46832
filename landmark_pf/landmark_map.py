import json
from collections import namedtuple


# map landmark, fixed position in map frame
Landmark = namedtuple('Landmark', ['id', 'x', 'y'])


# landmark map class
class LandmarkMap:
    def __init__(self, fname):
        with open(fname) as mapfile:
            content = mapfile.read()

        # json - {"width": w, "height": h, "landmarks": [{"id": i, "x": x, "y": y}, ...]}
        # text - one "x y id" line per landmark, whitespace separated
        if content.lstrip().startswith('{'):
            self._parse_json(content)
        else:
            self._parse_text(content)

    def _parse_json(self, content):
        try:
            config = json.loads(content)
            self.landmarks = tuple(Landmark(int(lm['id']), float(lm['x']), float(lm['y']))
                                   for lm in config['landmarks'])
        except (ValueError, KeyError, TypeError):
            raise ValueError('Cannot parse file')
        self.width = config.get('width')
        self.height = config.get('height')
        self._fit_bounds()

    def _parse_text(self, content):
        landmarks = []
        for line in content.splitlines():
            fields = line.split()
            # empty
            if not fields:
                continue
            if len(fields) != 3:
                raise ValueError('Cannot parse file')
            try:
                landmarks.append(Landmark(int(fields[2]), float(fields[0]), float(fields[1])))
            except ValueError:
                raise ValueError('Cannot parse file')
        self.landmarks = tuple(landmarks)
        self.width = None
        self.height = None
        self._fit_bounds()

    def _fit_bounds(self):
        # maps without explicit size span their landmarks
        if self.width is None:
            self.width = max([lm.x for lm in self.landmarks], default=0.0)
        if self.height is None:
            self.height = max([lm.y for lm in self.landmarks], default=0.0)

    def __len__(self):
        return len(self.landmarks)

    def __iter__(self):
        return iter(self.landmarks)

