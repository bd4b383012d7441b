import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns


def curve_records(curve):
    """Return a saturation curve as a list of (time, coverage) pairs"""
    t, cov = curve
    return [(float(ti), float(ci)) for ti, ci in zip(t, cov)]


def curve_frame(curve):
    t, cov = curve
    return pd.DataFrame({'time': np.asarray(t), 'coverage': np.asarray(cov)})


def plot_saturation(model, normalized=False, fignum=None, label=None,
                    color=None):
    """Plot the saturation curve of a dose model

    If normalized is True, times are given in units of the characteristic
    time t0.
    """

    t, cov = model.saturation_curve()
    if normalized:
        t = t/model.t0()
    if label is None:
        label = model.chem.prec.name

    with sns.axes_style('whitegrid'):
        fig = plt.figure(num=fignum, figsize=(5, 4))
        plt.plot(t, cov, color=color, marker='', ls='-', alpha=0.9,
                 label=label)
        if normalized:
            plt.xlabel(r'$t/t_0$', fontsize=12)
        else:
            plt.xlabel('Dose time (s)', fontsize=12)
        plt.ylabel('Surface coverage', fontsize=12)
        plt.ylim([0, 1.05])
        plt.legend()
        plt.tight_layout()
    return fig


if __name__ == '__main__':

    from aldsat.presets import ALDinitialize

    sns.set_style('whitegrid')
    plt.rcParams["font.family"] = "serif"

    systemL = ['Al2O3-200C', 'Al2O3-100C', 'TiO2-200C', 'W-200C']
    cL = sns.color_palette()[:4]

    for system, c in zip(systemL, cL):
        model = ALDinitialize(system)
        print(system, 't0 =', model.t0(), 's')
        plot_saturation(model, normalized=True, fignum='saturation',
                        label=system, color=c)

    plt.savefig('saturation.png')
    plt.show()
