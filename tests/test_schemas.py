from model_market_api.app.schemas.model import ModelCreate, ModelUpdate
from model_market_api.app.schemas.purchase import PurchaseCreate


def test_create_and_update_share_documented_fields():
    assert set(ModelCreate.model_fields) == set(ModelUpdate.model_fields)
    assert ModelUpdate.model_fields["createdBy"].examples == ["owner@example.com"]
    assert ModelUpdate.model_fields["ownerEmail"].examples == ["owner@example.com"]


def test_update_dump_holds_only_sent_keys():
    update = ModelUpdate(name=7, tags=["vision"])

    assert update.model_dump(exclude_unset=True) == {"name": 7, "tags": ["vision"]}


def test_purchase_keeps_extra_fields():
    purchase = PurchaseCreate(modelId=1, userEmail="u@example.com", coupon="SPRING")

    assert purchase.model_dump(exclude_unset=True) == {"modelId": 1, "userEmail": "u@example.com", "coupon": "SPRING"}
