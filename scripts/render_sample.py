# scripts/render_sample.py
import os, sys, argparse, datetime, logging
from cryptography.hazmat.primitives import serialization, hashes
from cryptography.hazmat.primitives.asymmetric import dh, ec, x25519
from cryptography import x509
from cryptography.x509.oid import NameOID

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from tlsdebug.common.config import load_settings, configure_logging
from tlsdebug.common.protocol import (
    RecordHeader, ClientHello, ServerHello, RawCertificate, ServerDHParams,
    HashSignAlgorithm, DigitallySigned, Alert, SNI, EllipticCurves,
    SignatureAlgorithms, SupportedVersions, KeyShare, ALPN, EarlyData,
    UnknownExtension,
)
from tlsdebug.render.extensions import render_extensions
from tlsdebug.storage.transcript import render_lines, append_lines, sha256_of_file

log = logging.getLogger("render_sample")

# RFC 3526 MODP group 14 (2048-bit)
P_HEX = (
    "FFFFFFFFFFFFFFFFC90FDAA22168C234C4C6628B80DC1CD129024E088A67CC74020BBEA63B139B22514A08798E3404DD"
    "EF9519B3CD3A431B302B0A6DF25F14374FE1356D6D51C245E485B576625E7EC6F44C42E9A637ED6B0BFF5CB6F406B7ED"
    "EE386BFB5A899FA5AE9F24117C4B1FE649286651ECE45B3DC2007CB8A163BF0598DA48361C55D39A69163FA8FD24CF5F"
    "83655D23DCA3AD961C62F356208552BB9ED529077096966D670C354E4ABC9804F1746C08CA18217C32905E462E36CE3B"
    "E39E772C180E86039B2783A2EC07A28FB5C55DF06F4C52C9DE2BCBF6955817183995497CEA956AE515D2261898FA0510"
    "15728E5A8AACAA68FFFFFFFFFFFFFFFF"
)
P = int(P_HEX, 16)
G = 2

def int_bytes(v: int) -> bytes:
    return v.to_bytes((v.bit_length() + 7) // 8 or 1, "big")

def self_signed_cert(key) -> bytes:
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, u"server")])
    now = datetime.datetime.now(datetime.timezone.utc)
    cert = (x509.CertificateBuilder()
            .subject_name(name)
            .issuer_name(name)
            .public_key(key.public_key())
            .serial_number(x509.random_serial_number())
            .not_valid_before(now - datetime.timedelta(minutes=5))
            .not_valid_after(now + datetime.timedelta(days=1))
            .sign(key, hashes.SHA256()))
    return cert.public_bytes(serialization.Encoding.DER)

def sample_handshake():
    """Record header, hellos, certificate, signed DH params and an alert, from fresh key material."""
    share = x25519.X25519PrivateKey.generate().public_key().public_bytes(
        serialization.Encoding.Raw, serialization.PublicFormat.Raw)
    extensions = [
        SNI(names=[(0, b"server"), (0, b"bad\xffname")]),
        EllipticCurves(groups=[0x001d, 0x0017, 0x9999]),
        SignatureAlgorithms(algorithms=[(4, 3), (4, 1), (0x0a, 3)]),
        SupportedVersions(versions=[0x0304, 0x0303]),
        KeyShare(data=b"\x00\x1d\x00\x20" + share),
        ALPN(protocols=[b"h2", b"http/1.1"]),
        EarlyData(),
        UnknownExtension(id=0x44, data=b"\x01\x02"),
    ]
    ch = ClientHello(version=0x0303, rand_time=0xcb34ecb1, rand_data=os.urandom(28),
                     ciphers=[0x1301, 0xc02f, 0x9999], comp=[0])
    sh = ServerHello(version=0x0303, rand_time=0x5f5e1000, rand_data=os.urandom(28),
                     session_id=os.urandom(32), cipher=0x009e, compression=0)

    sign_key = ec.generate_private_key(ec.SECP256R1())
    cert = RawCertificate(data=self_signed_cert(sign_key))

    dh_priv = dh.DHParameterNumbers(P, G).parameters().generate_private_key()
    params = ServerDHParams(dh_p=int_bytes(P), dh_g=int_bytes(G),
                            dh_ys=int_bytes(dh_priv.public_key().public_numbers().y))
    signed = DigitallySigned(
        alg=HashSignAlgorithm(hash=4, sign=3),
        data=sign_key.sign(params.dh_p + params.dh_g + params.dh_ys, ec.ECDSA(hashes.SHA256())),
    )
    return [
        RecordHeader(record_type=0x16, version=0x0301, len=0xc4),
        ch, sh, cert, params, signed,
        Alert(severity=2, code=40),
    ], extensions

def main():
    parser = argparse.ArgumentParser(description="Render a sample TLS handshake")
    parser.add_argument("--transcript", help="also append the rendering to this transcript file")
    args = parser.parse_args()

    settings = load_settings()
    configure_logging(settings)

    messages, extensions = sample_handshake()
    lines = render_lines(messages)
    lines.insert(2, "extensions: " + render_extensions(extensions))
    log.info("rendered %d structures", len(lines))
    for l in lines:
        print(l)
    if args.transcript:
        path = append_lines(lines, filename=args.transcript, directory=settings.transcript_dir)
        print(f"transcript {path} sha256={sha256_of_file(path)}")

if __name__ == "__main__":
    main()
