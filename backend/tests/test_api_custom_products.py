"""Custom product endpoints, including compatibility errors."""

from uuid import uuid4

import pytest

from infrastructure.persistence.models import CustomProduct, Part
from presentation.api.v1.serializers import (
    CustomProductCreateSerializer,
    CustomProductPartsSerializer,
    CustomProductSerializer,
    CustomProductUpdateSerializer,
    PartReferenceSerializer,
)
from presentation.api.v1.views.assembly import CustomProductViewSet

pytestmark = pytest.mark.django_db

URL = '/api/v1/custom-products/'


@pytest.fixture
def parts(create_part):
    return {
        'hardtail': create_part('frameType', 'hardtail'),
        'full_suspension': create_part('frameType', 'full-suspension'),
        'mountain_wheels': create_part('wheels', 'mountain wheels', price='95.00'),
        'fat_bike_wheels': create_part('wheels', 'fat bike wheels'),
        'road_wheels': create_part('wheels', 'road wheels'),
        'red_rims': create_part('rimColor', 'red'),
        'empty_chain': create_part('chain', 'single-speed', quantity=0),
        'skis': create_part('bindings', 'race', product_type='ski'),
    }


def create(api_client, parts=None, **fields):
    payload = {'name': 'My bike', 'price': '100', 'product_type': 'bicycle', **fields}
    if parts is not None:
        payload['parts'] = [str(part.id) for part in parts]
    return api_client.post(URL, payload, format='json')


def part_ids(response):
    return [p['id'] for p in response.data['parts']]


class TestCreate:

    def test_without_parts(self, api_client):
        response = create(api_client)
        assert response.status_code == 201
        assert response.data['parts'] == []
        assert response.data['version'] == 1

    def test_with_parts(self, api_client, parts):
        response = create(api_client, [parts['full_suspension'], parts['mountain_wheels']])

        assert response.status_code == 201
        assert part_ids(response) == [
            str(parts['full_suspension'].id), str(parts['mountain_wheels'].id)
        ]
        assert response.data['parts_price'] == '105.00'

    def test_incompatible_parts(self, api_client, parts):
        response = create(api_client, [parts['hardtail'], parts['mountain_wheels']])

        assert response.status_code == 400
        assert response.data['code'] == 'ASSEMBLY_VIOLATION'
        assert response.data['error'] == 'Mountain wheels require a full-suspension frame.'
        assert response.data['violation']['rule'] == 'mountain_wheels_need_full_suspension'
        assert not CustomProduct.objects.exists()

    def test_wrong_product_type(self, api_client, parts):
        response = create(api_client, [parts['skis']])
        assert response.status_code == 400
        assert response.data['error'] == 'Part bindings cannot be added to a bicycle.'

    def test_out_of_stock(self, api_client, parts):
        response = create(api_client, [parts['empty_chain']])
        assert response.status_code == 400
        assert response.data['error'] == 'Part chain is out of stock.'

    def test_missing_parts(self, api_client, parts):
        missing = uuid4()
        response = api_client.post(URL, {
            'name': 'My bike',
            'price': '100',
            'product_type': 'bicycle',
            'parts': [str(parts['hardtail'].id), str(missing)],
        }, format='json')

        assert response.status_code == 404
        assert response.data['code'] == 'PARTS_NOT_FOUND'
        assert response.data['missing_ids'] == [str(missing)]

    def test_required_fields(self, api_client):
        response = api_client.post(URL, {'price': '-5', 'product_type': ' '}, format='json')
        assert response.status_code == 400
        assert set(response.data) == {'name', 'price', 'product_type'}

    def test_product_type_defaults_to_bicycle(self, api_client):
        response = api_client.post(URL, {'name': 'My bike', 'price': '100'}, format='json')
        assert response.status_code == 201
        assert response.data['product_type'] == 'bicycle'
        assert CustomProduct.objects.get().product_type == 'bicycle'

    def test_list_empty(self, api_client):
        response = api_client.get(URL)
        assert response.status_code == 200
        assert response.data['results'] == []


class TestParts:

    @pytest.fixture
    def product(self, api_client, parts):
        return create(api_client, [parts['hardtail']]).data

    def test_attach_scenario(self, api_client, parts, product):
        url = f"{URL}{product['id']}/attach/"

        response = api_client.post(url, {'part': str(parts['mountain_wheels'].id)}, format='json')
        assert response.status_code == 400
        assert response.data['error'] == 'Mountain wheels require a full-suspension frame.'

        response = api_client.post(url, {'part': str(parts['full_suspension'].id)}, format='json')
        assert response.status_code == 200
        assert part_ids(response) == [str(parts['full_suspension'].id)]

        response = api_client.post(url, {'part': str(parts['mountain_wheels'].id)}, format='json')
        assert response.status_code == 200
        assert part_ids(response) == [
            str(parts['full_suspension'].id), str(parts['mountain_wheels'].id)
        ]
        assert response.data['version'] == 3

    def test_attach_unknown_part(self, api_client, product):
        response = api_client.post(
            f"{URL}{product['id']}/attach/", {'part': str(uuid4())}, format='json'
        )
        assert response.status_code == 404

    def test_attach_invalid_id(self, api_client, product):
        response = api_client.post(
            f"{URL}{product['id']}/attach/", {'part': 'nope'}, format='json'
        )
        assert response.status_code == 400

    def test_detach(self, api_client, parts, product):
        response = api_client.post(
            f"{URL}{product['id']}/detach/", {'part': str(parts['hardtail'].id)}, format='json'
        )
        assert response.status_code == 200
        assert response.data['parts'] == []

    def test_detach_not_attached(self, api_client, parts, product):
        response = api_client.post(
            f"{URL}{product['id']}/detach/", {'part': str(parts['road_wheels'].id)}, format='json'
        )
        assert response.status_code == 409
        assert response.data['code'] == 'INVALID_OPERATION'

    def test_replace(self, api_client, parts, product):
        response = api_client.patch(f"{URL}{product['id']}/parts/", {
            'parts': [str(parts['road_wheels'].id), str(parts['red_rims'].id)],
        }, format='json')

        assert response.status_code == 200
        assert part_ids(response) == [str(parts['road_wheels'].id), str(parts['red_rims'].id)]

    def test_replace_exclusion_rule(self, api_client, parts, product):
        for order in (['red_rims', 'fat_bike_wheels'], ['fat_bike_wheels', 'red_rims']):
            response = api_client.patch(f"{URL}{product['id']}/parts/", {
                'parts': [str(parts[name].id) for name in order],
            }, format='json')
            assert response.status_code == 400
            assert response.data['error'] == 'Fat bike wheels cannot have a red rim color.'

        stored = CustomProduct.objects.get(pk=product['id'])
        assert [link.part_id for link in stored.part_links.all()] == [parts['hardtail'].id]

    def test_replace_empty(self, api_client, product):
        response = api_client.patch(f"{URL}{product['id']}/parts/", {'parts': []}, format='json')
        assert response.status_code == 400
        assert response.data['parts'] == ['Parts array is required and cannot be empty.']

    def test_replace_missing(self, api_client, product):
        missing = uuid4()
        response = api_client.patch(
            f"{URL}{product['id']}/parts/", {'parts': [str(missing)]}, format='json'
        )
        assert response.status_code == 404
        assert response.data['missing_ids'] == [str(missing)]

    def test_unknown_product(self, api_client, parts):
        response = api_client.post(
            f'{URL}{uuid4()}/attach/', {'part': str(parts['hardtail'].id)}, format='json'
        )
        assert response.status_code == 404


class TestUpdateDelete:

    @pytest.fixture
    def product(self, api_client, parts):
        return create(api_client, [parts['hardtail'], parts['road_wheels']]).data

    def test_type_change_blocked(self, api_client, parts, product):
        response = api_client.patch(
            f"{URL}{product['id']}/", {'product_type': 'ski'}, format='json'
        )

        assert response.status_code == 400
        assert response.data['code'] == 'INCOMPATIBLE_PARTS'
        assert response.data['error'] == (
            'Cannot change product type because some existing parts are incompatible.'
        )
        assert response.data['incompatible_parts'] == [
            {'id': str(parts['hardtail'].id), 'category': 'frameType', 'product_type': 'bicycle'},
            {'id': str(parts['road_wheels'].id), 'category': 'wheels', 'product_type': 'bicycle'},
        ]
        assert CustomProduct.objects.get(pk=product['id']).product_type == 'bicycle'

    def test_update_fields(self, api_client, product):
        response = api_client.patch(
            f"{URL}{product['id']}/", {'name': 'Renamed', 'price': '150'}, format='json'
        )
        assert response.status_code == 200
        assert response.data['name'] == 'Renamed'
        assert response.data['price'] == '150.00'

    def test_update_without_fields(self, api_client, product):
        response = api_client.patch(f"{URL}{product['id']}/", {}, format='json')
        assert response.status_code == 400

    def test_delete_keeps_parts(self, api_client, product):
        response = api_client.delete(f"{URL}{product['id']}/")

        assert response.status_code == 204
        assert not CustomProduct.objects.exists()
        assert Part.objects.count() == 8

    def test_list_and_retrieve(self, api_client, product):
        listed = api_client.get(URL)
        assert [p['id'] for p in listed.data['results']] == [product['id']]

        detail = api_client.get(f"{URL}{product['id']}/")
        assert detail.status_code == 200
        assert len(detail.data['parts']) == 2


@pytest.mark.parametrize('action, serializer_class', [
    ('list', CustomProductSerializer),
    ('retrieve', CustomProductSerializer),
    ('create', CustomProductCreateSerializer),
    ('partial_update', CustomProductUpdateSerializer),
    ('parts', CustomProductPartsSerializer),
    ('attach', PartReferenceSerializer),
    ('detach', PartReferenceSerializer),
    (None, CustomProductSerializer),
])
def test_serializer_per_action(action, serializer_class):
    assert CustomProductViewSet(action=action).get_serializer_class() is serializer_class
