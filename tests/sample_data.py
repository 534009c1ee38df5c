ADDRESS = "0x1111111111111111111111111111111111111111"
OTHER = "0x2222222222222222222222222222222222222222"
THIRD = "0x3333333333333333333333333333333333333333"
TOKEN = "0xaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa"
ONE_ETH = 10 ** 18

# 2024-01-15 00:00:00 UTC
JAN_15 = 1705276800
DAY = 86400


def tx_row(tx_hash, from_address, to_address, value, timestamp=JAN_15, block_number=1):
    return {
        "transaction_hash": tx_hash,
        "block_number": block_number,
        "block_timestamp": str(timestamp),
        "from_address": from_address,
        "to_address": to_address,
        "value": str(value),
        "gas_used": "21000",
        "gas_price": "1000000000",
    }
