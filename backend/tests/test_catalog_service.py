"""Part options map."""

from application.services.catalog import CatalogService, build_part_options

from .fakes import InMemoryPartCatalog, make_part


def test_groups_distinct_values_in_catalog_order():
    parts = [
        make_part('wheels', 'road wheels'),
        make_part('rimColor', 'red'),
        make_part('wheels', 'mountain wheels'),
        make_part('wheels', 'road wheels', product_type='bicycle'),
        make_part('bindings', 'race', product_type='ski'),
    ]
    assert build_part_options(parts) == {
        'bicycle': {
            'wheels': ['road wheels', 'mountain wheels'],
            'rimColor': ['red'],
        },
        'ski': {'bindings': ['race']},
    }


def test_empty_catalog():
    assert CatalogService(InMemoryPartCatalog()).part_options() == {}


def test_filter_by_product_type():
    catalog = InMemoryPartCatalog([
        make_part('wheels', 'road wheels'),
        make_part('bindings', 'race', product_type='ski'),
    ])
    assert CatalogService(catalog).part_options('ski') == {'ski': {'bindings': ['race']}}
