from convo_bot.models import CENTER_NAME, Center, Characteristic, Solution, SolutionAffinity


def test_subjects_compare_by_name_only() -> None:
    therapy = Solution("Therapy")
    declared = Characteristic(
        "Anxiety",
        synonyms=("anxious",),
        affinities=(SolutionAffinity(solution=therapy, multiplier=2.0),),
    )
    bare = Characteristic("Anxiety")

    assert declared == bare
    assert hash(declared) == hash(bare)
    assert {declared: 1}[bare] == 1
    assert Solution("Therapy") == therapy
    assert Solution("Anxiety") != bare


def test_characteristic_affinity_lookup() -> None:
    therapy = Solution("Therapy")
    exercise = Solution("Exercise")
    anxiety = Characteristic(
        "Anxiety",
        synonyms=("anxious", "worried"),
        affinities=(SolutionAffinity(therapy, 2.0), SolutionAffinity(exercise, 1.0)),
    )

    assert anxiety.declares(therapy) is True
    assert anxiety.declares(Solution("Meditation")) is False
    assert anxiety.multiplier_for(therapy) == 2.0
    assert anxiety.multiplier_for(Solution("Meditation")) is None
    assert anxiety.terms == ("Anxiety", "anxious", "worried")


def test_center_uses_reserved_name() -> None:
    assert Center().name == CENTER_NAME
    assert str(Center()) == "centerNode"
