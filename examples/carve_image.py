"""
Seam carving demo.

Usage:
    python carve_image.py [image_path] [n_columns] [n_rows]

Without an image path a synthetic test picture is generated. Writes the
energy map with the first vertical seam, a seam preview and the carved
result to ../output/.
"""

import logging
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from seam_carving import SeamCarver, load_picture, save_picture, picture_from_array, picture_to_array

OUTPUT_DIR = os.path.join(os.path.dirname(__file__), '..', 'output')


def make_test_picture(H=60, W=90):
    """Dark background with two bright discs; seams should pass between them."""
    yy, xx = np.mgrid[0:H, 0:W]
    img = np.zeros((H, W, 3), dtype=np.uint8)
    img[:, :, 2] = (40 + 60 * yy / H).astype(np.uint8)
    for cx, cy, r, color in [(22, 30, 12, (250, 200, 40)), (68, 28, 14, (220, 60, 60))]:
        disc = (xx - cx) ** 2 + (yy - cy) ** 2 <= r * r
        img[disc] = color
    return picture_from_array(img)


def save_energy_figure(carver, seam, path):
    energy = carver.energy_map().numpy()
    fig, axes = plt.subplots(1, 2, figsize=(12, 4))
    axes[0].imshow(picture_to_array(carver.picture))
    axes[0].plot(seam, range(len(seam)), 'r-', linewidth=1)
    axes[0].set_title('Picture with vertical seam')
    im = axes[1].imshow(energy, cmap='viridis')
    axes[1].plot(seam, range(len(seam)), 'r-', linewidth=1)
    axes[1].set_title('Dual-gradient energy')
    fig.colorbar(im, ax=axes[1])
    for ax in axes:
        ax.axis('off')
    fig.tight_layout()
    fig.savefig(path, dpi=120)
    plt.close(fig)
    print(f"Saved: {path}")


def main():
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")
    os.makedirs(OUTPUT_DIR, exist_ok=True)

    if len(sys.argv) > 1:
        print(f"Loading {sys.argv[1]}...")
        picture = load_picture(sys.argv[1])
    else:
        print("No image given, generating a test picture...")
        picture = make_test_picture()
    print(f"Picture size: {picture.width} x {picture.height}")

    n_columns = int(sys.argv[2]) if len(sys.argv) > 2 else picture.width // 4
    n_rows = int(sys.argv[3]) if len(sys.argv) > 3 else 0

    carver = SeamCarver(picture)
    seam = carver.find_vertical_seam()
    save_energy_figure(carver, seam, os.path.join(OUTPUT_DIR, 'energy_with_seam.png'))

    # Preview on a separate carver so the carved result is unaffected
    preview = SeamCarver(picture)
    horizontal_seam = preview.find_horizontal_seam()
    preview.highlight_vertical_seam(seam)
    preview.highlight_horizontal_seam(horizontal_seam)
    path = os.path.join(OUTPUT_DIR, 'seam_preview.png')
    save_picture(preview.picture, path)
    print(f"Saved: {path}")

    print(f"Removing {n_columns} columns and {n_rows} rows...")
    carved = carver.carve(columns=n_columns, rows=n_rows)
    path = os.path.join(OUTPUT_DIR, 'carved.png')
    save_picture(carved, path)
    print(f"Saved: {path} ({carved.width} x {carved.height})")


if __name__ == '__main__':
    main()
