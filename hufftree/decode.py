import argparse
import os
from .bitpack import BitReader, BitWriter
from .codec import decompress

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--input", required=True, help="path to .hf")
    ap.add_argument("--output", required=True, help="path to decoded file")
    ap.add_argument("--debug", type=int, default=0, help="debug level (1=summary, 4=tree info)")
    args = ap.parse_args()

    with open(args.input, "rb") as f:
        data = f.read()

    # decode fully before touching the output file
    w = BitWriter()
    st = decompress(BitReader(data), w, debug=args.debug)
    out = w.close()

    os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
    with open(args.output, "wb") as f:
        f.write(out)
    print(f"[decode] wrote {args.output} bytes={st['bytes_out']} leaves={st['leaves']}")

if __name__ == "__main__":
    main()
