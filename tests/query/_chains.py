from esdata.query import Criteria


def type_and_rate_chain() -> Criteria:
    return Criteria.where("type").is_("hotel").and_("rate").less_than_equal(10)


def or_not_and_chain() -> Criteria:
    return (
        Criteria("name", is_or=True)
        .is_("spring")
        .and_("message")
        .contains("legacy")
        .not_()
        .and_("available")
        .is_(True)
    )


def and_not_or_chain() -> Criteria:
    return (
        Criteria.where("available")
        .is_(True)
        .and_("message")
        .contains("legacy")
        .not_()
        .or_("name")
        .is_("spring")
    )


def mixed_chain() -> Criteria:
    return (
        Criteria.where("message")
        .starts_with("some")
        .ends_with("message")
        .boost_by(2.0)
        .and_("rate")
        .between(1, 100)
        .or_("type")
        .in_(["hotel", "motel"])
        .and_("name")
        .fuzzy("sprng")
        .not_()
        .and_("description")
        .expression("foo AND bar")
    )
