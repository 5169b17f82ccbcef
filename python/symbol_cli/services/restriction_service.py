# 文字列で指定された制限内容をSDKのAccountRestrictionFlagsに変換する
from symbolchain.sc import AccountRestrictionFlags

from symbol_cli.errors import ValidationError

TARGET_FLAGS = {
    "address": AccountRestrictionFlags.ADDRESS,
    "mosaic": AccountRestrictionFlags.MOSAIC_ID,
    "operation": AccountRestrictionFlags.TRANSACTION_TYPE,
}


class RestrictionService:
    def get_account_restriction_flags(
        self, target: str, restriction_type: str, restriction_direction: str = "incoming"
    ) -> AccountRestrictionFlags:
        if target not in TARGET_FLAGS:
            raise ValidationError(f"Unknown restriction target '{target}'")

        flags: AccountRestrictionFlags = TARGET_FLAGS[target]  # 制限対象

        # 制限内容 許可(フラグなし) / 拒否
        if restriction_type == "block":
            flags |= AccountRestrictionFlags.BLOCK
        elif restriction_type != "allow":
            raise ValidationError(f"Unknown restriction type '{restriction_type}'")

        # 制限の方向 受信(フラグなし) / 送信
        if restriction_direction == "outgoing":
            flags |= AccountRestrictionFlags.OUTGOING
        elif restriction_direction != "incoming":
            raise ValidationError(f"Unknown restriction direction '{restriction_direction}'")

        return flags

    def get_account_mosaic_restriction_flags(
        self, restriction_type: str, restriction_direction: str = "incoming"
    ) -> AccountRestrictionFlags:
        # モザイク制限は受信方向のみ
        if restriction_direction == "outgoing":
            raise ValidationError("Mosaic restrictions can only be applied to incoming transactions")
        return self.get_account_restriction_flags("mosaic", restriction_type, restriction_direction)
