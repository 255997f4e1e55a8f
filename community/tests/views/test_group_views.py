from django.test import TestCase
from django.urls import reverse
from rest_framework.test import APIClient

from community.models import Group
from community.tests.helpers import make_user


class GroupApiTestCase(TestCase):
    def setUp(self):
        self.owner = make_user(username="owner")
        self.cook = make_user(username="cook")
        self.owner_client = APIClient()
        self.owner_client.force_authenticate(user=self.owner)
        self.cook_client = APIClient()
        self.cook_client.force_authenticate(user=self.cook)
        response = self.owner_client.post(
            reverse("group_list"),
            {"name": "Bakers", "description": "bread people", "isPrivate": True, "requireApproval": True},
            format="json",
        )
        self.assertEqual(response.status_code, 201)
        self.group = response.json()

    def test_creator_is_admin_member(self):
        self.assertEqual(self.group["creatorId"], str(self.owner.pk))
        self.assertEqual(self.group["members"][0]["role"], "admin")
        self.assertEqual(self.group["membersCount"], 1)

    def test_join_approval_flow(self):
        group_id = self.group["_id"]
        self.assertEqual(self.cook_client.post(reverse("group_join", args=[group_id])).json(), {"status": "pending"})
        self.assertEqual(self.cook_client.post(reverse("group_join", args=[group_id])).status_code, 409)

        url = reverse("group_request", args=[group_id, self.cook.pk])
        self.assertEqual(self.cook_client.put(url, {"action": "approve"}, format="json").status_code, 403)
        response = self.owner_client.put(url, {"action": "approve"}, format="json")
        self.assertEqual(response.json(), {"status": "approved"})

        detail = self.owner_client.get(reverse("group_detail", args=[group_id])).json()
        self.assertEqual(detail["membersCount"], 2)
        self.assertEqual(detail["pendingRequests"], [])

    def test_open_group_join(self):
        Group.objects.filter(pk=self.group["_id"]).update(require_approval=False)
        response = self.cook_client.post(reverse("group_join", args=[self.group["_id"]]))
        self.assertEqual(response.json(), {"status": "joined"})

    def test_leave_and_creator_cannot_leave(self):
        Group.objects.filter(pk=self.group["_id"]).update(require_approval=False)
        self.cook_client.post(reverse("group_join", args=[self.group["_id"]]))
        leave = self.cook_client.delete(reverse("group_member", args=[self.group["_id"], self.cook.pk]))
        self.assertEqual(leave.status_code, 200)
        creator_leave = self.owner_client.delete(reverse("group_member", args=[self.group["_id"], self.owner.pk]))
        self.assertEqual(creator_leave.status_code, 400)

    def test_delete_group_creator_only(self):
        url = reverse("group_detail", args=[self.group["_id"]])
        self.assertEqual(self.cook_client.delete(url).status_code, 403)
        self.assertEqual(self.owner_client.delete(url).status_code, 200)
        self.assertFalse(Group.objects.exists())

    def test_list_mine(self):
        Group.objects.create(name="Grillers", creator=self.cook)
        self.assertEqual(len(self.owner_client.get(reverse("group_list")).json()), 2)
        mine = self.owner_client.get(reverse("group_list") + "?mine=1").json()
        self.assertEqual([g["name"] for g in mine], ["Bakers"])
