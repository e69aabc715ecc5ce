import pytest

from junos_netconf import builders
from junos_netconf.params import Params
from junos_netconf.request import Family, OperationRequest


def test_when_building_command_then_text_is_element_content():
    # WHEN building an operational command
    body = builders.build_command("show version", "xml")

    # THEN expect command text inside the element
    assert body == '<command format="xml">show version</command>'


def test_when_load_has_no_content_and_no_node_then_element_is_self_closed():
    # WHEN building load without content
    body = builders.build_load_configuration("", "", {"rescue": "rescue"})

    # THEN expect self-closed element
    assert body == '<load-configuration rescue="rescue"/>'


def test_when_load_has_content_and_node_then_content_is_nested():
    # WHEN building load with content and node
    body = builders.build_load_configuration(
        "system { host-name r1; }", "configuration-text", {"action": "merge"}
    )

    # THEN expect content nested in node nested in load-configuration
    assert body == (
        '<load-configuration action="merge">'
        "<configuration-text>system { host-name r1; }</configuration-text>"
        "</load-configuration>"
    )


@pytest.mark.parametrize(
    "config_data,config_node",
    [
        ("system { host-name r1; }", ""),
        ("", "configuration-text"),
    ],
    ids=["content-only", "node-only"],
)
def test_when_load_has_only_one_of_content_or_node_then_element_is_self_closed(
    config_data, config_node
):
    # WHEN building load with only one of content and node
    body = builders.build_load_configuration(config_data, config_node)

    # THEN expect self-closed element
    assert body == "<load-configuration/>"


def test_when_load_node_is_xml_configuration_then_content_is_not_escaped():
    # WHEN building load with XML configuration
    body = builders.build_load_configuration(
        "<system><host-name>r1</host-name></system>",
        "configuration",
        {"action": "merge", "format": "xml"},
    )

    # THEN expect XML verbatim
    assert body == (
        '<load-configuration action="merge" format="xml">'
        "<configuration><system><host-name>r1</host-name></system></configuration>"
        "</load-configuration>"
    )


def test_when_committing_without_params_then_only_synchronize_is_sent():
    # WHEN building commit with defaults
    body = builders.build_commit_configuration()

    # THEN expect single empty synchronize child
    assert body == "<commit-configuration><synchronize/></commit-configuration>"


def test_when_committing_without_synchronize_then_no_children_are_sent():
    # WHEN building commit with synchronize disabled
    body = builders.build_commit_configuration(synchronize=False)

    # THEN expect no children
    assert body == "<commit-configuration/>"


def test_when_committing_with_params_then_each_becomes_a_child_element():
    # WHEN building commit with params
    body = builders.build_commit_configuration(
        Params([("at-time", "04:00:00"), ("log", "rollout-42")])
    )

    # THEN expect synchronize first then params as children in order
    assert body == (
        "<commit-configuration>"
        "<synchronize/>"
        "<at-time>04:00:00</at-time>"
        "<log>rollout-42</log>"
        "</commit-configuration>"
    )


def test_when_commit_params_hold_synchronize_then_it_is_not_repeated():
    # WHEN building commit with synchronize given explicitly
    body = builders.build_commit_configuration(
        Params([("check", ""), ("synchronize", "")])
    )

    # THEN expect one synchronize child where it was given
    assert body == "<commit-configuration><check/><synchronize/></commit-configuration>"


def test_when_getting_configuration_then_content_is_verbatim_body():
    # WHEN building get-configuration with a filter stanza
    body = builders.build_get_configuration(
        "<configuration><interfaces/></configuration>",
        {"format": "xml", "database": "candidate"},
    )

    # THEN expect stanza without a wrapper
    assert body == (
        '<get-configuration format="xml" database="candidate">'
        "<configuration><interfaces/></configuration>"
        "</get-configuration>"
    )


def test_when_rollback_information_has_no_compare_then_one_child_is_sent():
    # WHEN building rollback information with a rollback id only
    body = builders.build_get_rollback_information(1)

    # THEN expect exactly one child
    assert body == (
        "<get-rollback-information><rollback>1</rollback></get-rollback-information>"
    )


def test_when_rollback_information_has_compare_then_two_children_are_sent():
    # WHEN building rollback information with rollback and compare ids
    body = builders.build_get_rollback_information(1, 2)

    # THEN expect rollback then compare
    assert body == (
        "<get-rollback-information>"
        "<rollback>1</rollback>"
        "<compare>2</compare>"
        "</get-rollback-information>"
    )


@pytest.mark.parametrize(
    "builder,expected",
    [
        (builders.build_abort, "<abort/>"),
        (
            builders.build_open_configuration,
            "<open-configuration><private/></open-configuration>",
        ),
        (builders.build_close_configuration, "<close-configuration/>"),
        (builders.build_lock_configuration, "<lock-configuration/>"),
        (builders.build_unlock_configuration, "<unlock-configuration/>"),
        (builders.build_request_end_session, "<request-end-session/>"),
    ],
    ids=["abort", "open", "close", "lock", "unlock", "end-session"],
)
def test_when_building_fixed_rpc_then_static_body_is_returned(builder, expected):
    # WHEN building a fixed rpc
    body = builder()

    # THEN expect static body
    assert body == expected


def test_when_building_checksum_then_path_is_nested():
    # WHEN building checksum information
    body = builders.build_get_checksum_information("/var/tmp/junos.tgz")

    # THEN expect path child
    assert body == (
        "<get-checksum-information>"
        "<path>/var/tmp/junos.tgz</path>"
        "</get-checksum-information>"
    )


@pytest.mark.parametrize(
    "request_",
    [
        OperationRequest(
            Family.COMMAND, Params(format="text"), body_content="show version"
        ),
        OperationRequest(
            Family.LOAD_CONFIGURATION,
            Params(action="set"),
            body_element="configuration-set",
            body_content="set system host-name r1",
        ),
        OperationRequest(Family.COMMIT_CONFIGURATION, Params(log="foo")),
        OperationRequest(Family.GET_CONFIGURATION, Params(format="text")),
        OperationRequest(Family.GET_ROLLBACK_INFORMATION, Params(rollback="1")),
        OperationRequest(Family.OPEN_CONFIGURATION),
        OperationRequest(Family.GET_CHECKSUM_INFORMATION, body_content="/tmp/a"),
    ],
    ids=["command", "load", "commit", "get", "rollback", "open", "checksum"],
)
def test_when_building_same_request_twice_then_bodies_are_identical(request_):
    # WHEN building the same request twice
    first = builders.build(request_)
    second = builders.build(request_)

    # THEN expect byte identical bodies
    assert first == second


def test_when_building_request_then_family_builder_is_used():
    # GIVEN a load request
    request = OperationRequest(
        Family.LOAD_CONFIGURATION,
        Params(action="set"),
        body_element="configuration-set",
        body_content="set system host-name r1",
    )

    # WHEN building
    body = builders.build(request)

    # THEN expect load body
    assert body == (
        '<load-configuration action="set">'
        "<configuration-set>set system host-name r1</configuration-set>"
        "</load-configuration>"
    )


def test_when_building_commit_request_without_synchronize_then_flag_is_omitted():
    # GIVEN a commit request with synchronize disabled
    request = OperationRequest(
        Family.COMMIT_CONFIGURATION, Params(check=""), synchronize=False
    )

    # WHEN building
    body = builders.build(request)

    # THEN expect only the check child
    assert body == "<commit-configuration><check/></commit-configuration>"


def test_when_commit_params_give_synchronize_a_value_then_it_is_emptied():
    # WHEN building commit with a valued synchronize param
    body = builders.build_commit_configuration(
        Params([("log", "foo"), ("synchronize", "yes")])
    )

    # THEN expect an empty synchronize child in place
    assert body == (
        "<commit-configuration><log>foo</log><synchronize/></commit-configuration>"
    )


def test_when_commit_params_hold_synchronize_and_flag_is_off_then_value_is_kept():
    # WHEN building commit with synchronize disabled and given as a param
    body = builders.build_commit_configuration(
        Params(synchronize="yes"), synchronize=False
    )

    # THEN expect the param as given
    assert body == (
        "<commit-configuration><synchronize>yes</synchronize></commit-configuration>"
    )


def test_when_set_configuration_holds_xml_characters_then_text_is_escaped():
    # WHEN building a set load with an ampersand and angle brackets
    body = builders.build_load_configuration(
        'set system login message "a & <b>"', "configuration-set", {"action": "set"}
    )

    # THEN expect escaped configuration text
    assert body == (
        '<load-configuration action="set">'
        '<configuration-set>set system login message "a &amp; &lt;b&gt;"'
        "</configuration-set>"
        "</load-configuration>"
    )
