"""
Unit tests for inclusion proof generation.
"""

import pytest

from veritree.exceptions import ValidationError
from veritree.merkle import (
    ProofGenerator,
    build_tree,
    decode_proof,
    encode_proof,
    get_digest,
    get_proof,
)


class TestProofGeneration:
    """Test proof generation for values in and out of the tree."""

    def test_two_item_proof(self):
        """Test that the proof for one of two items is the other leaf digest."""
        digest = get_digest()
        tree = build_tree([b"a", b"b"])

        assert tree.get_proof(b"a") == [digest(b"b")]
        assert tree.get_proof(b"b") == [digest(b"a")]

    def test_three_item_proof_for_padded_leaf(self):
        """Test the proof for a leaf that was paired with itself."""
        digest = get_digest()
        tree = build_tree([b"a", b"b", b"c"])

        low, high = sorted([digest(b"a"), digest(b"b")])

        assert tree.get_proof(b"c") == [digest(b"c"), digest(low, high)]

    def test_proof_is_leaf_level_first(self):
        digest = get_digest()
        tree = build_tree([b"a", b"b", b"c", b"d"])

        proof = tree.get_proof(b"a")
        low, high = sorted([digest(b"c"), digest(b"d")])

        assert proof[0] == digest(b"b")
        assert proof[1] == digest(low, high)

    def test_single_item_proof_is_empty(self):
        tree = build_tree([b"only"])
        assert tree.get_proof(b"only") == []

    def test_absent_value_returns_none(self, addresses):
        tree = build_tree(addresses)
        assert tree.get_proof("0x0000000000000000000000000000000000000000") is None

    def test_absent_value_in_single_item_tree(self):
        assert build_tree([b"only"]).get_proof(b"other") is None

    def test_proof_length_equals_depth(self, addresses):
        tree = build_tree(addresses)

        for address in addresses:
            assert len(tree.get_proof(address)) == tree.depth == 3

    def test_str_value_matches_bytes_value(self, addresses):
        tree = build_tree(addresses)
        assert tree.get_proof(addresses[2]) == tree.get_proof(addresses[2].encode("utf-8"))

    def test_duplicate_items_use_first_leaf(self):
        """Test that a repeated item still yields one valid proof."""
        digest = get_digest()
        tree = build_tree([b"x", b"y", b"x", b"z"])

        proof = tree.get_proof(b"x")

        assert proof[0] in (digest(b"y"), digest(b"z"))
        assert len(proof) == 2
        assert tree.verify(proof, b"x")

    def test_proof_entries_have_digest_size(self, addresses):
        tree = build_tree(addresses, "blake2b")
        assert all(len(entry) == 64 for entry in tree.get_proof(addresses[0]))

    def test_get_proof_function(self, addresses):
        tree = build_tree(addresses)
        assert get_proof(tree, addresses[4]) == tree.get_proof(addresses[4])

    def test_generator_reused_across_values(self, addresses):
        tree = build_tree(addresses)
        generator = ProofGenerator(tree)

        proofs = [generator.find(address) for address in addresses]

        assert all(proof is not None for proof in proofs)
        assert generator.find("missing") is None


class TestProofEncoding:
    """Test hex encoding of proofs."""

    def test_encode_proof(self):
        assert encode_proof([b"\x00\xff", b"\xab"]) == ["00ff", "ab"]

    def test_encode_empty_proof(self):
        assert encode_proof([]) == []

    def test_decode_proof(self):
        assert decode_proof(["00ff", "AB"]) == [b"\x00\xff", b"\xab"]

    def test_decode_accepts_0x_prefix(self):
        assert decode_proof(["0x00ff", "0XAB"]) == [b"\x00\xff", b"\xab"]

    def test_decode_encoded_proof(self, addresses):
        tree = build_tree(addresses)
        proof = tree.get_proof(addresses[0])

        assert decode_proof(encode_proof(proof)) == proof

    def test_decode_invalid_hex_raises_error(self):
        with pytest.raises(ValidationError, match="entry 1"):
            decode_proof(["00", "zz"])

    def test_decode_non_string_raises_error(self):
        with pytest.raises(ValidationError, match="hex string"):
            decode_proof([12])
