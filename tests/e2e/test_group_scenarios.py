"""End-to-end group ledger workflows"""

import pytest
from httpx import AsyncClient


async def add_expense(client, headers, group_id, payer, split_type, splits, amount, description):
    response = await client.post(
        f"/api/v1/groups/{group_id}/expenses",
        json={
            "description": description,
            "amount": amount,
            "payer_email": payer.email,
            "split_type": split_type,
            "splits": [{"email": u.email, "value": v} for u, v in splits],
        },
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


async def get_balances(client, headers, group_id):
    response = await client.get(f"/api/v1/groups/{group_id}/balances", headers=headers)
    assert response.status_code == 200
    return response.json()


def nets(balances):
    return {b["email"]: b["net_amount"] for b in balances["balances"]}


class TestTripWorkflow:
    """Test a trip from first expense to fully settled"""

    @pytest.mark.asyncio
    async def test_share_and_settle_everything(
        self, client: AsyncClient, auth_headers, group_id, alice, bob, carol
    ):
        """
        Complete workflow: add expenses, follow suggestions, end at zero

        Scenario:
        - Alice pays 300 for a hotel, split equally
        - Bob pays 120 for dinner, split 50/25/25
        - Carol pays 45 for a taxi shared with Alice only
        - Every suggested settlement is recorded
        - All balances end at zero
        """
        headers = auth_headers(alice)

        await add_expense(
            client, headers, group_id, alice, "EQUAL",
            [(alice, 1), (bob, 1), (carol, 1)], 300, "Hotel",
        )
        await add_expense(
            client, headers, group_id, bob, "PERCENTAGE",
            [(alice, 50), (bob, 25), (carol, 25)], 120, "Dinner",
        )
        await add_expense(
            client, headers, group_id, carol, "EXACT",
            [(alice, 20), (carol, 25)], 45, "Taxi",
        )

        balances = await get_balances(client, headers, group_id)
        # alice: +300 -100 -60 -20, bob: +120 -100 -30, carol: +45 -100 -30 -25
        assert nets(balances) == {
            "alice@example.com": 120,
            "bob@example.com": -10,
            "carol@example.com": -110,
        }
        assert sum(nets(balances).values()) == 0

        for suggestion in balances["settlements"]:
            response = await client.post(
                f"/api/v1/groups/{group_id}/settlements",
                json={
                    "from_email": suggestion["from_email"],
                    "to_email": suggestion["to_email"],
                    "amount": suggestion["amount"],
                },
                headers=headers,
            )
            assert response.status_code == 201, response.text

        final = await get_balances(client, headers, group_id)
        assert set(nets(final).values()) == {0}
        assert final["settlements"] == []

    @pytest.mark.asyncio
    async def test_partial_settlements(
        self, client: AsyncClient, auth_headers, group_id, alice, bob
    ):
        """
        Workflow: settle a debt in instalments

        Scenario:
        - Alice pays 101 split equally with Bob (Alice absorbs the odd unit)
        - Bob pays back 20
        - A payment larger than the remaining 30 is refused
        - The exact remainder is accepted
        - Nothing further can be paid
        """
        headers = auth_headers(bob)
        url = f"/api/v1/groups/{group_id}/settlements"
        await add_expense(
            client, headers, group_id, alice, "EQUAL", [(alice, 1), (bob, 1)], 101, "Groceries"
        )
        assert nets(await get_balances(client, headers, group_id)) == {
            "alice@example.com": 50,
            "bob@example.com": -50,
        }

        response = await client.post(
            url, json={"from_email": bob.email, "to_email": alice.email, "amount": 20},
            headers=headers,
        )
        assert response.status_code == 201

        response = await client.post(
            url, json={"from_email": bob.email, "to_email": alice.email, "amount": 31},
            headers=headers,
        )
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "AMOUNT_EXCEEDS_OUTSTANDING"
        assert response.json()["error"]["context"]["outstanding"] == 30

        response = await client.post(
            url, json={"from_email": bob.email, "to_email": alice.email, "amount": 30},
            headers=headers,
        )
        assert response.status_code == 201

        balances = await get_balances(client, headers, group_id)
        assert nets(balances)["bob@example.com"] == 0
        assert balances["settlements"] == []

        response = await client.post(
            f"/api/v1/groups/{group_id}/settlements",
            json={"from_email": bob.email, "to_email": alice.email, "amount": 1},
            headers=headers,
        )
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_SETTLEMENT_DIRECTION"


class TestMembershipWorkflow:
    """Test membership changes against existing history"""

    @pytest.mark.asyncio
    async def test_removed_member_keeps_balance_but_cannot_settle(
        self, client: AsyncClient, auth_headers, store, group_id, alice, bob, carol
    ):
        """
        Workflow: a member leaves with an open debt

        Scenario:
        - Alice pays 60 split equally among three
        - Carol leaves the group
        - Carol's debt still shows in balances
        - Carol can no longer be a settlement party or a split user
        """
        headers = auth_headers(alice)
        await add_expense(
            client, headers, group_id, alice, "EQUAL",
            [(alice, 1), (bob, 1), (carol, 1)], 60, "Museum",
        )

        store.remove_member(group_id, carol.id)

        assert nets(await get_balances(client, headers, group_id))["carol@example.com"] == -20

        response = await client.post(
            f"/api/v1/groups/{group_id}/settlements",
            json={"from_email": carol.email, "to_email": alice.email, "amount": 20},
            headers=headers,
        )
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_SETTLEMENT_USERS"

        response = await client.post(
            f"/api/v1/groups/{group_id}/expenses",
            json={
                "description": "Lunch",
                "amount": 30,
                "payer_email": alice.email,
                "split_type": "EQUAL",
                "splits": [{"email": alice.email, "value": 1}, {"email": carol.email, "value": 1}],
            },
            headers=headers,
        )
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_SPLIT_USER"

        response = await client.get(
            f"/api/v1/groups/{group_id}/balances", headers=auth_headers(carol)
        )
        assert response.status_code == 403
