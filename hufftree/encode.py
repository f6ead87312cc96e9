import argparse
import os
from .bitpack import BitReader, BitWriter
from .codec import compress
from .metrics import entropy_bits, mean_code_length, compression_ratio

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--input", required=True, help="path to any file")
    ap.add_argument("--output", required=True, help="path to .hf")
    ap.add_argument("--debug", type=int, default=0, help="debug level (1=summary, 4=code table)")
    args = ap.parse_args()

    with open(args.input, "rb") as f:
        data = f.read()

    os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
    with open(args.output, "wb") as f:
        st = compress(BitReader(data), BitWriter(f), debug=args.debug)

    n_out = os.path.getsize(args.output)
    print(f"[encode] wrote {args.output}")
    print(f"[encode] in={len(data)}B out={n_out}B ratio={compression_ratio(len(data), n_out):.3f} "
          f"leaves={st['leaves']} header_bits={st['header_bits']}")
    print(f"[encode] entropy={entropy_bits(st['counts']):.3f} bits/B "
          f"mean_code={mean_code_length(st['counts'], st['codebook']):.3f} bits/B")

if __name__ == "__main__":
    main()
