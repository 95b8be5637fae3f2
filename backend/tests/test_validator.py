"""AssemblyValidator behaviour for attach, replace-all and type change."""

from .fakes import make_part, make_product


class TestValidateAttach:

    def test_mountain_wheels_scenario(self, validator, hardtail, full_suspension, mountain_wheels):
        product = make_product([hardtail])

        violation = validator.validate_attach(product, mountain_wheels)
        assert violation.message == 'Mountain wheels require a full-suspension frame.'

        product = make_product([full_suspension])
        assert validator.validate_attach(product, mountain_wheels) is None

    def test_attach_swaps_same_category(self, validator, hardtail, full_suspension, mountain_wheels):
        # the new frame replaces the hardtail, so the wheels become legal
        product = make_product([hardtail, mountain_wheels])
        assert validator.validate_attach(product, full_suspension) is None

    def test_type_homogeneity(self, validator):
        skis = make_part('bindings', 'race', product_type='ski')
        violation = validator.validate_attach(make_product(), skis)
        assert violation.rule == 'product_type_matches'
        assert violation.message == 'Part bindings cannot be added to a bicycle.'

    def test_stock_gate(self, validator, hardtail):
        wheels = make_part('wheels', 'mountain wheels', quantity=0)
        violation = validator.validate_attach(make_product([hardtail]), wheels)
        assert violation.rule == 'in_stock'
        assert violation.message == 'Part wheels is out of stock.'

    def test_attach_always_checks_stock(self, validator):
        chain = make_part('chain', 'single-speed', quantity=0)
        violation = validator.validate_attach(make_product([chain]), chain)
        assert violation.rule == 'in_stock'

    def test_idempotent(self, validator, hardtail, mountain_wheels):
        product = make_product([hardtail])
        first = validator.validate_attach(product, mountain_wheels)
        second = validator.validate_attach(product, mountain_wheels)
        assert first == second
        assert product.parts == (hardtail,)

    def test_red_rims_on_existing_fat_bike_wheels(self, validator, fat_bike_wheels, red_rims):
        violation = validator.validate_attach(make_product([fat_bike_wheels]), red_rims)
        assert violation.rule == 'no_red_rims_on_fat_bike_wheels'


class TestValidateReplaceAll:

    def test_exclusion_rule_regardless_of_order(self, validator, fat_bike_wheels, red_rims):
        product = make_product()
        for parts in ([fat_bike_wheels, red_rims], [red_rims, fat_bike_wheels]):
            violation = validator.validate_replace_all(product, parts)
            assert violation.message == 'Fat bike wheels cannot have a red rim color.'

    def test_old_parts_are_ignored(self, validator, hardtail, mountain_wheels, full_suspension):
        product = make_product([hardtail])
        assert validator.validate_replace_all(product, [full_suspension, mountain_wheels]) is None

    def test_first_violation_in_iteration_order(self, validator):
        skis = make_part('bindings', 'race', product_type='ski')
        empty = make_part('chain', 'single-speed', quantity=0)

        violation = validator.validate_replace_all(make_product(), [empty, skis])
        assert violation.rule == 'in_stock'

        violation = validator.validate_replace_all(make_product(), [skis, empty])
        assert violation.rule == 'product_type_matches'

    def test_kept_part_without_stock_passes(self, validator):
        chain = make_part('chain', 'single-speed', quantity=0)
        rims = make_part('rimColor', 'black')
        assert validator.validate_replace_all(make_product([chain]), [chain, rims]) is None

    def test_duplicate_category_rejected(self, validator, red_rims, black_rims):
        violation = validator.validate_replace_all(make_product(), [red_rims, black_rims])
        assert violation.rule == 'single_part_per_category'


class TestValidateTypeChange:

    def test_returns_every_incompatible_part(self, validator, hardtail, road_wheels, red_rims):
        product = make_product([hardtail, road_wheels, red_rims])

        incompatible = validator.validate_type_change(product, 'ski')

        assert [p.part_id for p in incompatible] == [hardtail.id, road_wheels.id, red_rims.id]
        assert incompatible[0].to_dict() == {
            'id': str(hardtail.id),
            'category': 'frameType',
            'product_type': 'bicycle',
        }
        assert product.product_type == 'bicycle'

    def test_only_mismatching_parts(self, validator, hardtail):
        board = make_part('deck', 'maple', product_type='skateboard')
        product = make_product([hardtail, board])
        incompatible = validator.validate_type_change(product, 'skateboard')
        assert [p.part_id for p in incompatible] == [hardtail.id]

    def test_compatible_returns_none(self, validator, hardtail):
        assert validator.validate_type_change(make_product([hardtail]), 'bicycle') is None
        assert validator.validate_type_change(make_product(), 'ski') is None
