import pyflowtex as pft
import matplotlib.pyplot as plt
import taichi as ti
import time

ti.init(ti.gpu, debug=False)

# Same noise, streaked along four directions
params = pft.GenerationParameters(width=512, height=512, octaves=5,
	scale_x=6., scale_y=6., lacunarity=2.2, gain=0.55,
	blur_strength=8, seed=12)

angles = [0., 45., 90., 135.]

fig, ax = plt.subplots(1, len(angles) + 1, figsize=(4 * (len(angles) + 1), 4))

st = time.time()
field = pft.noise.synthesize(params)
print(f"noise: {time.time() - st:.3f}s")

ax[0].imshow(field, cmap='gray', origin='lower', vmin=0, vmax=1)
ax[0].set_title('no blur')

pixels = pft.rastermanip.scalar_to_rgba(field)
for k, angle in enumerate(angles):
	st = time.time()
	blurred = pft.rastermanip.directional_blur(pixels, angle, params.blur_strength)
	print(f"blur {angle}: {time.time() - st:.3f}s")
	ax[k + 1].imshow(blurred, origin='lower')
	ax[k + 1].set_title(f'{angle:.0f} deg')

for a in ax:
	a.set_axis_off()

# Anisotropic scales already give a horizontal flow before blurring
texture = pft.generate_flow_texture(params.replace(scale_x=8., scale_y=2., blur_angle_degrees=0.))
pft.misc.save_png(texture.pixels, 'flow_texture.png')

plt.show()
