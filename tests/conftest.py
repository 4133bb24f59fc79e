import pytest

# mainnet transaction carrying two inline datums in its witness set
SAMPLE_TX_HEX = (
    "84a700d901028282582008c49c049c49a665cbb83644b22662af7125a8ecd365a616b823"
    "88a1a7bb551000825820c4e43afd34dd0ad3340b495e7a58f0be40691b04b556f1ab5241"
    "9927f4df5b8b00018383583911a76f0fb801a29f591e9871576508d85b0b5f3c38774f65"
    "032f58fdad5139e81456c1b4e2f0af22c1e94ff22ea648588b03a7c7914b6eb256821a00"
    "1430a2a1581c3373f1171594fc4be7f7e3a099252cd085a9734a5dfe4732e2311921a14d"
    "576f6e6465724d696c6b303935015820e735f209d58839f565e0190d00b9f6619b93793b"
    "db45647256c29af4e4983af883583911a76f0fb801a29f591e9871576508d85b0b5f3c38"
    "774f65032f58fdad5139e81456c1b4e2f0af22c1e94ff22ea648588b03a7c7914b6eb256"
    "821a001430a2a1581c3373f1171594fc4be7f7e3a099252cd085a9734a5dfe4732e23119"
    "21a14d576f6e6465724d696c6b303136015820493a91d5154bbf1e0f0ce025f84b0b0524"
    "18c1fe62e93e8dd7b974b1da85d12882583901c8d25b5c76b19bda9c88a0120a2dbcdc2d"
    "dd3f82921aa98ca35854285139e81456c1b4e2f0af22c1e94ff22ea648588b03a7c7914b"
    "6eb2561a164cd26b021a00036a51031a0a8ac2e307582010d70a7bf1ff1ed57b4ac55c6e"
    "d323880724390905b3f69b92615166c3ac9699081a0a8aa6b30b58205e4edebba50f3bf7"
    "be0d7ff7e07619b63d4edea30be0de8f641e5561206ef921a104d901029fd8799f9fd879"
    "9fd8799fd8799f581cc8d25b5c76b19bda9c88a0120a2dbcdc2ddd3f82921aa98ca35854"
    "28ffd8799fd8799fd8799f581c5139e81456c1b4e2f0af22c1e94ff22ea648588b03a7c7"
    "914b6eb256ffffffff1a0a7d8c00ffd8799fd8799fd8799f581cd3854a7de25ea94326fe"
    "c3b65ac36f20d59930118d83fead972d600effd8799fd8799fd8799f581c11a0974ad366"
    "0a0ffca16e2c72cce55033f225ee9a9f39fe23686209ffffffff1a01312d00ffff581cc8"
    "d25b5c76b19bda9c88a0120a2dbcdc2ddd3f82921aa98ca3585428ffd8799f9fd8799fd8"
    "799fd8799f581cc8d25b5c76b19bda9c88a0120a2dbcdc2ddd3f82921aa98ca3585428ff"
    "d8799fd8799fd8799f581c5139e81456c1b4e2f0af22c1e94ff22ea648588b03a7c7914b"
    "6eb256ffffffff1a0fbc5200ffd8799fd8799fd8799f581cd3854a7de25ea94326fec3b6"
    "5ac36f20d59930118d83fead972d600effd8799fd8799fd8799f581c11a0974ad3660a0f"
    "fca16e2c72cce55033f225ee9a9f39fe23686209ffffffff1a01c9c380ffff581cc8d25b"
    "5c76b19bda9c88a0120a2dbcdc2ddd3f82921aa98ca3585428fffff5a11902a2a1636d73"
    "67715761797570205472616e73616374696f6e"
)

SAMPLE_DATUM_HEX = (
    "d8799f9fd8799fd8799fd8799f581cc8d25b5c76b19bda9c88a0120a2dbcdc2ddd3f8292"
    "1aa98ca3585428ffd8799fd8799fd8799f581c5139e81456c1b4e2f0af22c1e94ff22ea6"
    "48588b03a7c7914b6eb256ffffffff1a0a7d8c00ffff581cc8d25b5c76b19bda9c88a012"
    "0a2dbcdc2ddd3f82921aa98ca3585428ff"
)

# the two datums of SAMPLE_TX_HEX, they differ only in two amounts
SAMPLE_TX_DATUM_0 = (
    "d8799f9fd8799fd8799fd8799f581cc8d25b5c76b19bda9c88a0120a2dbcdc2ddd3f8292"
    "1aa98ca3585428ffd8799fd8799fd8799f581c5139e81456c1b4e2f0af22c1e94ff22ea6"
    "48588b03a7c7914b6eb256ffffffff1a0a7d8c00ffd8799fd8799fd8799f581cd3854a7d"
    "e25ea94326fec3b65ac36f20d59930118d83fead972d600effd8799fd8799fd8799f581c"
    "11a0974ad3660a0ffca16e2c72cce55033f225ee9a9f39fe23686209ffffffff1a01312d"
    "00ffff581cc8d25b5c76b19bda9c88a0120a2dbcdc2ddd3f82921aa98ca3585428ff"
)

SAMPLE_TX_DATUM_1 = (
    "d8799f9fd8799fd8799fd8799f581cc8d25b5c76b19bda9c88a0120a2dbcdc2ddd3f8292"
    "1aa98ca3585428ffd8799fd8799fd8799f581c5139e81456c1b4e2f0af22c1e94ff22ea6"
    "48588b03a7c7914b6eb256ffffffff1a0fbc5200ffd8799fd8799fd8799f581cd3854a7d"
    "e25ea94326fec3b65ac36f20d59930118d83fead972d600effd8799fd8799fd8799f581c"
    "11a0974ad3660a0ffca16e2c72cce55033f225ee9a9f39fe23686209ffffffff1a01c9c3"
    "80ffff581cc8d25b5c76b19bda9c88a0120a2dbcdc2ddd3f82921aa98ca3585428ff"
)

@pytest.fixture
def sample_tx_hex():
    return SAMPLE_TX_HEX

@pytest.fixture
def sample_datum_hex():
    return SAMPLE_DATUM_HEX


@pytest.fixture
def sample_tx_datums():
    return SAMPLE_TX_DATUM_0, SAMPLE_TX_DATUM_1
