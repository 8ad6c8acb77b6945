# -*- coding: utf-8 -*-

import json


class DecodeError(ValueError):
    """The payload can't be converted into Beer records."""
    pass


class Beer(object):
    """A beer, as described by the catalogue API.

    Attributes:
        id (int)
        name (str)
        description (str)
    """

    def __init__(self, id, name, description):
        self.id = id
        self.name = name
        self.description = description

    @classmethod
    def from_dict(cls, data):
        """Build a Beer from its JSON representation.

        Fields others than 'id', 'name' and 'description' are ignored.

        Raises:
            DecodeError: if a field is missing, or has not the right type.
        """
        if not isinstance(data, dict):
            raise DecodeError('Beer record must be an object, not %s'
                              % type(data).__name__)

        for field, expected_type in (('id', int), ('name', str),
                                     ('description', str)):
            if field not in data:
                raise DecodeError('Beer record without "%s": %r'
                                  % (field, data))
            # bool is a subclass of int, but not a valid id.
            if (not isinstance(data[field], expected_type) or
                    isinstance(data[field], bool)):
                raise DecodeError('Beer field "%s" must be of type %s: %r'
                                  % (field, expected_type.__name__,
                                     data[field]))

        return cls(data['id'], data['name'], data['description'])

    def __eq__(self, other):
        if not isinstance(other, Beer):
            return NotImplemented
        return ((self.id, self.name, self.description) ==
                (other.id, other.name, other.description))

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((self.id, self.name, self.description))

    def __repr__(self):
        return 'Beer(%s, %r)' % (self.id, self.name)


def decode_beers(payload):
    """Convert a JSON payload into a list of beers.

    Args:
        payload (bytes): JSON array of beer objects, encoded in UTF-8.
    Returns:
        list of Beer
    Raises:
        DecodeError: if the payload is not a valid JSON array of beers.
    """
    try:
        content = json.loads(payload.decode('utf-8'))
    except (ValueError, RecursionError) as error:
        raise DecodeError('Invalid JSON payload: %s' % error)

    if not isinstance(content, list):
        raise DecodeError('Expected a JSON array of beers, got %s'
                          % type(content).__name__)

    return [Beer.from_dict(item) for item in content]
