from __future__ import annotations

import pytest

from payment_agent.agent import Agent, default_agent, default_transport, new_agent
from payment_agent.config import AgentConfig
from payment_agent.core.errors import AgentClosedError, MalformedTargetError, PaymentValidationError
from payment_agent.core.transport import SyncTransport
from payment_agent.resources import (
    AccountAgent,
    AmountAgent,
    BalanceAgent,
    CheckoutAgent,
    CouponAgent,
    MarketAgent,
    RechargeAgent,
)
from tests.shared.transport import Response, SequencedClient

SUB_AGENTS = {
    "account": AccountAgent,
    "amount": AmountAgent,
    "balance": BalanceAgent,
    "checkout": CheckoutAgent,
    "coupon": CouponAgent,
    "market": MarketAgent,
    "recharge": RechargeAgent,
}


def _agent(agent_config: AgentConfig, *steps) -> tuple[Agent, SequencedClient]:
    client = SequencedClient(steps)
    return new_agent(SyncTransport(agent_config, client=client), config=agent_config), client


def test_every_sub_agent_is_a_stateless_view_over_one_agent(agent_config: AgentConfig):
    agent, _ = _agent(agent_config)
    for name, sub_agent_type in SUB_AGENTS.items():
        sub_agent = getattr(agent, name)
        assert isinstance(sub_agent, sub_agent_type)
        assert sub_agent.agent is agent
        assert not hasattr(sub_agent, "__dict__")


def test_url_for_joins_base_url_path_and_params():
    agent = new_agent(
        SyncTransport(client=SequencedClient([])),
        config=AgentConfig(base_url="http://payments.test/v1/"),
    )
    assert agent.url_for("/market") == "http://payments.test/v1/market"
    assert agent.url_for("amounts", {"namespace": "a b"}) == (
        "http://payments.test/v1/amounts?namespace=a+b"
    )


def test_new_agent_without_arguments_uses_default_transport():
    agent = new_agent()
    assert agent.transport is default_transport()
    agent.close()
    assert agent.transport.closed is False


def test_default_agent_is_shared():
    assert default_agent() is default_agent()
    assert default_agent().transport is default_transport()


def test_closed_default_agent_is_replaced():
    closed = default_agent()
    closed.close()

    replacement = default_agent()

    assert replacement is not closed
    assert replacement.closed is False
    assert replacement.transport is default_transport()
    assert replacement.transport.closed is False
    assert default_agent() is replacement


def test_new_agent_with_config_owns_its_transport(agent_config: AgentConfig):
    with new_agent(config=agent_config) as agent:
        assert agent.transport is not default_transport()
        assert agent.config is agent_config
    assert agent.transport.closed is True


def test_close_leaves_supplied_transport_open(agent_config: AgentConfig):
    agent, client = _agent(agent_config)
    agent.close()
    agent.close()
    assert agent.transport.closed is False
    assert client.closed is False


def test_closed_agent_raises_without_network_call(agent_config: AgentConfig):
    agent, client = _agent(agent_config, Response(200, {}))
    agent.close()
    with pytest.raises(AgentClosedError):
        agent.market.get()
    with pytest.raises(AgentClosedError):
        agent.set_follow_redirects(False)
    assert client.calls == 0


def test_invalid_config_is_rejected():
    with pytest.raises(PaymentValidationError):
        new_agent(config=AgentConfig(base_url=""))


def test_malformed_base_url_fails_before_network_call():
    client = SequencedClient([Response(200, {})])
    agent = new_agent(
        SyncTransport(client=client),
        config=AgentConfig(base_url="http://payments.test/\x00"),
    )
    with pytest.raises(MalformedTargetError):
        agent.market.get()
    assert client.calls == 0


def test_empty_path_segment_fails_before_network_call(agent_config: AgentConfig):
    agent, client = _agent(agent_config, Response(200, {}))
    with pytest.raises(MalformedTargetError):
        agent.balance.get("")
    assert client.calls == 0


def test_set_follow_redirects_reaches_shared_client(agent_config: AgentConfig):
    agent, client = _agent(agent_config)
    agent.set_follow_redirects(False)
    assert client.follow_redirects is False
