from neighborfit.catalog import (
    display_rating,
    filter_neighborhoods,
    list_cities,
    list_states,
    overall_rating,
)

from .fixtures.neighborhoods import catalog, neighborhood


def test_display_rating_scale():
    assert display_rating(0) == 1.0
    assert display_rating(10) == 5.0
    assert display_rating(11) == 5.0
    assert display_rating(5) == 3.0
    assert display_rating(7.3) == 3.9


def test_overall_rating_uses_key_factors():
    n = neighborhood(1, default=0.0, safety=10.0, job_opportunities=10.0)

    # (5 + 5 + 1 + 1 + 1) / 5
    assert overall_rating(n) == 2.6


def test_search_is_case_insensitive_across_fields():
    by_name = filter_neighborhoods(catalog(), search="powai")
    by_state = filter_neighborhoods(catalog(), search="KARNATAKA")

    assert [n.name for n in by_name] == ["Powai"]
    assert [n.name for n in by_state] == ["Koramangala"]


def test_city_and_state_filters():
    mumbai = filter_neighborhoods(catalog(), city="Mumbai")
    everything = filter_neighborhoods(catalog(), city="all", state=None)

    assert {n.city for n in mumbai} == {"Mumbai"}
    assert len(mumbai) == 3
    assert len(everything) == 4


def test_sorting_options():
    by_name = filter_neighborhoods(catalog())
    by_safety = filter_neighborhoods(catalog(), sort_by="safety")
    by_affordability = filter_neighborhoods(catalog(), sort_by="affordability")
    by_overall = filter_neighborhoods(catalog(), sort_by="overall")

    assert [n.name for n in by_name] == ["Bandra West", "Koramangala", "Powai", "Thane West"]
    assert by_safety[0].name == "Bandra West"
    assert by_affordability[0].name == "Thane West"
    ratings = [overall_rating(n) for n in by_overall]
    assert ratings == sorted(ratings, reverse=True)


def test_unknown_sort_falls_back_to_name():
    names = [n.name for n in filter_neighborhoods(catalog(), sort_by="random")]

    assert names == sorted(names)


def test_city_and_state_lists():
    assert list_cities(catalog()) == ["Bengaluru", "Mumbai"]
    assert list_states(catalog()) == ["Karnataka", "Maharashtra"]
