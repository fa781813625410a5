import copy
import json

import pytest

from openapi_envelope import InvalidArgument
from openapi_envelope.openapi_parts import array, reference, response, response_with_accepted, type_

ERROR_ENTRY = {
    'description': 'error',
    'content': {'application/json': {'schema': {'$ref': '#/components/schemas/ErrorResponse'}}},
}


def _props(responses, status):
    return responses[status]['content']['application/json']['schema']['properties']


def test_response_keys_in_order():
    assert list(response(type_('string'))) == ['default', '4XX', '200']


def test_error_entries_reference_error_response():
    r = response(reference('Pet'))
    assert r['default'] == ERROR_ENTRY
    assert r['4XX'] == ERROR_ENTRY
    assert r['default'] is not r['4XX']


def test_result_is_callers_fragment():
    fragments = [reference('Pet'), type_('boolean'), array(array(reference('ScoredPoint'))), {}]
    for f in fragments:
        assert _props(response(f), '200')['result'] == f


def test_pet_scenario():
    r = response(reference('Pet'))
    assert r['200']['content']['application/json']['schema']['properties']['result'] == {
        '$ref': '#/components/schemas/Pet'
    }


def test_success_envelope_shape():
    r = response(type_('integer'))
    ok = r['200']
    assert ok['description'] == 'successful operation'
    schema = ok['content']['application/json']['schema']
    assert schema['type'] == 'object'
    props = schema['properties']
    assert list(props) == ['usage', 'time', 'status', 'result']
    assert props['usage'] == {
        'default': None,
        'anyOf': [{'$ref': '#/components/schemas/HardwareUsage'}, {'nullable': True}],
    }
    assert props['time'] == {
        'type': 'number',
        'format': 'float',
        'description': 'Time spent to process this request',
        'example': 0.002,
    }
    assert props['status'] == {'type': 'string', 'example': 'ok'}


def test_response_does_not_mutate_or_alias_model():
    model = {'type': 'object', 'properties': {'name': {'type': 'string'}}}
    before = copy.deepcopy(model)
    r = response(model)
    assert model == before
    result = _props(r, '200')['result']
    assert result is not model
    model['properties']['extra'] = {'type': 'integer'}
    assert result == before


def test_response_is_deterministic():
    f = array(reference('Pet'))
    assert json.dumps(response(f)) == json.dumps(response(f))
    assert json.dumps(response_with_accepted(f)) == json.dumps(response_with_accepted(f))


def test_response_rejects_non_fragment():
    for bad in ['Pet', None, 3, [reference('Pet')]]:
        with pytest.raises(InvalidArgument):
            response(bad)
        with pytest.raises(InvalidArgument):
            response_with_accepted(bad)


def test_accepted_extends_success_response():
    f = reference('UpdateResult')
    plain = response(f)
    accepted = response_with_accepted(f)
    assert list(accepted) == ['default', '4XX', '200', '202']
    for status in ['default', '4XX', '200']:
        assert accepted[status] == plain[status]


def test_accepted_entry_has_no_result_or_examples():
    entry = response_with_accepted(type_('string'))['202']
    assert entry['description'] == 'operation is accepted'
    schema = entry['content']['application/json']['schema']
    assert schema['type'] == 'object'
    assert schema['properties'] == {
        'time': {'type': 'number', 'format': 'float', 'description': 'Time spent to process this request'},
        'status': {'type': 'string'},
    }
    assert 'result' not in schema['properties']
    assert 'usage' not in schema['properties']


def test_response_usable_as_array_item():
    r = response(type_('string'))
    assert array(r)['items'] == r
