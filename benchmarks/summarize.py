from collections import defaultdict

import csv
import glob
import os

subdir = 'summarized'

PHASES = ['commit', 'distribute', 'verify', 'reconstruct']

# For each CSV written by bench_all.py, generate a .dat file with the
# average time per phase that can be used directly by a LaTeX plot.
def generate_data(filename):
    counts = 0
    sums = defaultdict(float)

    with open(filename) as csvfile:
        reader = csv.DictReader(csvfile)
        for row in reader:
            counts += 1
            for phase in PHASES:
                sums[phase] += float(row[phase])
    if not counts:
        return None

    os.makedirs(subdir, exist_ok=True)
    base = os.path.splitext(os.path.basename(filename))[0]
    outname = os.path.join(subdir, f'{base}.dat')
    with open(outname, 'w') as outfile:
        print('phase\telapsed', file=outfile)
        for phase in PHASES:
            print(f'{phase}\t{sums[phase] / counts:.12f}', file=outfile)
    return outname

if __name__ == '__main__':
    for filename in sorted(glob.glob('vss_*.csv')):
        generate_data(filename)
