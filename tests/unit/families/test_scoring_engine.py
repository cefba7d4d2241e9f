from datetime import date

import pytest

from src.families.domain.services.eligibility_scanner import EligibilityScanner
from src.families.domain.services.scoring_engine import score_candidate
from src.families.domain.value_objects.assignment_criteria import AssignmentCriteria
from tests.factories import BATCH, TODAY, make_family, make_pair, make_student


def criteria(mode="homogeneous", **kw) -> AssignmentCriteria:
    return AssignmentCriteria.create(mode=mode, target_batch=BATCH, **kw)


def slot_for(father=None, mother=None, children=(), crit=None, **family_kw):
    crit = crit or criteria()
    family = make_family(make_pair(father, mother, children), **family_kw)
    slots = EligibilityScanner(crit).scan([family])
    assert len(slots) == 1
    return slots[0]


# ─── Homogeneous ─────────────────────────────────────────────────────────────

def test_exact_match_at_common_level_scores_100():
    slot = slot_for()
    result = score_candidate(make_student("male"), slot, criteria(), TODAY)

    assert result is not None
    assert result.score == pytest.approx(100)
    assert result.address_match == "Matched kebele: 01"
    assert result.diversity_score is None


@pytest.mark.parametrize(
    "address, expected_score, expected_match",
    [
        (dict(kebele="02"), 40, "Matched wereda: Gondar Zuria"),
        (dict(kebele="02", wereda="Dabat"), 30, "Matched zone: North Gondar"),
        (dict(kebele="02", wereda="Dabat", zone="South Gondar"), 20, "Matched region: Amhara"),
    ],
)
def test_fallback_scores_coarser_levels(address, expected_score, expected_match):
    slot = slot_for()
    result = score_candidate(make_student("male", **address), slot, criteria(), TODAY)

    assert result is not None
    assert result.mode_score == expected_score
    assert result.address_match == expected_match


def test_no_address_overlap_is_ineligible():
    slot = slot_for()
    stranger = make_student("male", region="Oromia", zone="Jimma", wereda="Seka", kebele="09")

    assert score_candidate(stranger, slot, criteria(), TODAY) is None


def test_region_only_slot_has_no_fallback():
    father = make_student("male", zone="North Gondar")
    mother = make_student("female", zone="South Gondar")
    slot = slot_for(father, mother)
    assert slot.common_level.value == "region"

    same_region = make_student("male", zone="Awi")
    assert score_candidate(same_region, slot, criteria(), TODAY).mode_score == 100

    other_region = make_student("male", region="Tigray")
    assert score_candidate(other_region, slot, criteria(), TODAY) is None


def test_unknown_candidate_value_never_matches():
    slot = slot_for()
    blank = make_student("male", region=None, zone=None, wereda=None, kebele=None)

    assert score_candidate(blank, slot, criteria(), TODAY) is None


# ─── Heterogeneous ───────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "address, expected",
    [
        (dict(region="Oromia"), 4),
        (dict(zone="Awi"), 3),
        (dict(wereda="Dabat"), 2),
        (dict(kebele="05"), 1),
    ],
)
def test_diversity_points_by_level(address, expected):
    crit = criteria("heterogeneous")
    slot = slot_for(crit=crit)
    result = score_candidate(make_student("female", **address), slot, crit, TODAY)

    assert result is not None
    assert result.diversity_score == expected
    assert result.address_match is None


def test_identical_address_is_ineligible_in_heterogeneous_mode():
    crit = criteria("heterogeneous")
    slot = slot_for(crit=crit)

    assert score_candidate(make_student("male"), slot, crit, TODAY) is None


def test_level_must_differ_from_both_parents():
    crit = criteria("heterogeneous")
    father = make_student("male", region="Amhara")
    mother = make_student("female", region="Oromia", zone="Jimma", wereda="Seka", kebele="09")
    slot = slot_for(father, mother, crit=crit)

    # same region as the mother, zone differs from both
    candidate = make_student("male", region="Oromia", zone="Arsi")
    assert score_candidate(candidate, slot, crit, TODAY).diversity_score == 3


def test_unknown_region_counts_as_different():
    crit = criteria("heterogeneous")
    slot = slot_for(crit=crit)
    candidate = make_student("male", region=None, zone="Awi")

    assert score_candidate(candidate, slot, crit, TODAY).diversity_score == 4


def test_blank_address_scores_at_region_level():
    crit = criteria("heterogeneous")
    slot = slot_for(crit=crit)
    candidate = make_student("male", region=None, zone=None, wereda=None, kebele=None)

    assert score_candidate(candidate, slot, crit, TODAY).diversity_score == 4


def test_unknown_zone_under_shared_region_is_not_different():
    crit = criteria("heterogeneous")
    slot = slot_for(crit=crit)
    candidate = make_student("male", zone=None, wereda="Dembia")

    assert score_candidate(candidate, slot, crit, TODAY).diversity_score == 2


def test_heterogeneous_slot_needs_no_shared_address():
    crit = criteria("heterogeneous")
    father = make_student("male", region="Amhara")
    mother = make_student("female", region="Oromia")
    slot = slot_for(father, mother, crit=crit)

    assert slot.common_level is None
    assert score_candidate(make_student("male", region="Sidama"), slot, crit, TODAY).diversity_score == 4


# ─── Hard filters and tie-breaks ─────────────────────────────────────────────

def test_younger_candidates_rank_higher():
    slot = slot_for()
    twenty = make_student("male", date_of_birth=date(2006, 3, 1))
    twenty_five = make_student("male", date_of_birth=date(2001, 3, 1))

    assert score_candidate(twenty, slot, criteria(), TODAY).score == pytest.approx(101.0)
    assert score_candidate(twenty_five, slot, criteria(), TODAY).score == pytest.approx(100.5)


def test_gender_balance_restricts_and_rewards_needed_gender():
    son = make_student("male")
    slot = slot_for(children=[son])

    assert slot.sons == 1 and slot.daughters == 0
    assert score_candidate(make_student("male"), slot, criteria(), TODAY) is None

    daughter = score_candidate(make_student("female"), slot, criteria(), TODAY)
    assert daughter.score == pytest.approx(100.05)


def test_gender_balance_can_be_switched_off():
    crit = criteria(consider_gender_balance=False)
    slot = slot_for(children=[make_student("male")], crit=crit)

    result = score_candidate(make_student("male"), slot, crit, TODAY)
    assert result.score == pytest.approx(100)


def test_balanced_slot_adds_no_gender_bonus():
    slot = slot_for(children=[make_student("male"), make_student("female")])

    assert score_candidate(make_student("female"), slot, criteria(), TODAY).score == pytest.approx(100)


def test_age_ceiling_is_older_parent_plus_five():
    father = make_student("male", date_of_birth=date(2000, 1, 1))
    mother = make_student("female", date_of_birth=date(2002, 1, 1))
    slot = slot_for(father, mother)

    at_limit = make_student("male", date_of_birth=date(1995, 6, 1))
    too_old = make_student("male", date_of_birth=date(1994, 6, 1))

    assert score_candidate(at_limit, slot, criteria(), TODAY) is not None
    assert score_candidate(too_old, slot, criteria(), TODAY) is None
    assert score_candidate(too_old, slot, criteria(consider_age=False), TODAY) is not None


def test_missing_birth_dates_pass_the_age_filter():
    father = make_student("male")
    mother = make_student("female", date_of_birth=date(2002, 1, 1))
    slot = slot_for(father, mother)
    old = make_student("male", date_of_birth=date(1960, 1, 1))

    assert score_candidate(old, slot, criteria(), TODAY) is not None


def test_other_batch_candidate_rejected_unless_family_allows_it():
    crit = criteria()
    outsider = make_student("male", batch="2023")

    strict = slot_for(crit=crit)
    assert score_candidate(outsider, strict, crit, TODAY) is None

    open_slot = slot_for(crit=crit, allow_other_batches=True)
    assert score_candidate(outsider, open_slot, crit, TODAY) is not None
